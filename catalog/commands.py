import click

from catalog.extensions import db
from catalog.exceptions import ConflictError
from catalog.schemas import CategoryCreateSchema
from catalog.services.category_service import CategoryService
from catalog.utils.validators import load_payload


def register_commands(app):
    """Register Flask CLI commands"""

    @app.cli.command("init-db")
    def init_db():
        """Initialize database"""
        db.create_all()
        click.echo('Database initialized successfully!')

    @app.cli.command("drop-db")
    @click.confirmation_option(prompt='Are you sure you want to drop all tables?')
    def drop_db():
        """Drop all tables"""
        db.drop_all()
        click.echo('Database dropped successfully!')

    @app.cli.command("create-category")
    @click.argument("name")
    @click.option("--description", default=None, help="Short category description")
    def create_category(name, description):
        """Create a category from the command line"""
        data, errors = load_payload(
            CategoryCreateSchema(), {"name": name, "description": description}
        )
        if errors:
            for field, messages in errors.items():
                click.echo(f"{field}: {', '.join(messages)}", err=True)
            raise SystemExit(1)

        try:
            category = CategoryService(db.session).create_category(**data)
        except ConflictError as e:
            click.echo(e.message, err=True)
            raise SystemExit(1)

        click.echo(f'Category created: {category.name} ({category.slug})')
