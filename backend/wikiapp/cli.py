import click
from flask import Flask
from .constants import ROLE_NAMES
from .extensions import db
from .models.user import User


def register_cli(app: Flask) -> None:
    @app.cli.command("init-db")
    def init_db():
        """Create database tables"""
        db.create_all()
        click.echo("Database initialized")

    @app.cli.command("create-user")
    @click.argument("email")
    @click.option("--password", prompt=True, hide_input=True, confirmation_prompt=True)
    @click.option("--name", default="")
    @click.option("--role", type=click.Choice(sorted(ROLE_NAMES)), default="editor")
    def create_user(email: str, password: str, name: str, role: str):
        """Create a user that can log in through /api/v1/auth/login"""
        if User.query.filter_by(email=email).first():
            raise click.ClickException(f"User {email} already exists")

        u = User()
        u.email = email
        u.name = name
        u.role = ROLE_NAMES[role]
        u.set_password(password)
        db.session.add(u)
        db.session.commit()
        click.echo(f"Created {role} user id={u.id}")
