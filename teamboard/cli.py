"""Teamboard CLI tool (teamboardctl)."""

from typing import List

import typer

app = typer.Typer(name="teamboardctl", help="Teamboard CLI")
db_app = typer.Typer(help="Database management commands")
teams_app = typer.Typer(help="Team management commands")
app.add_typer(db_app, name="db")
app.add_typer(teams_app, name="teams")


def _server_connection():
    """Open a PyMySQL connection to the server named in DATABASE_URL (no database)."""
    import pymysql
    from sqlalchemy.engine import make_url
    from teamboard.core.config import settings

    url = make_url(settings.DATABASE_URL)
    if not url.drivername.startswith("mysql"):
        typer.echo(f"❌ {url.drivername} databases are created on first connect, nothing to do")
        raise typer.Exit(code=1)
    conn = pymysql.connect(
        host=url.host or "localhost",
        port=url.port or 3306,
        user=url.username,
        password=url.password or "",
    )
    return conn, url.database


@db_app.command("create")
def db_create():
    """Create the MySQL database if it doesn't exist."""
    conn, db_name = _server_connection()
    try:
        cursor = conn.cursor()
        cursor.execute(f"CREATE DATABASE IF NOT EXISTS `{db_name}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci")
        conn.commit()
        typer.echo(f"✅ Database '{db_name}' created (or already exists)")
    finally:
        conn.close()


@db_app.command("init")
def db_init():
    """Create all tables."""
    from teamboard.db.session import init_db

    init_db()
    typer.echo("✅ Tables created")


@db_app.command("seed")
def db_seed():
    """Seed sample users, a team, projects and tasks."""
    from teamboard.db.session import SessionLocal, init_db
    from teamboard.db.seeds.seed_sample_data import seed_sample_data

    init_db()
    db = SessionLocal()
    try:
        seed_sample_data(db)
    finally:
        db.close()
    typer.echo("✅ All seeds applied")


@db_app.command("reset")
def db_reset():
    """Drop and recreate all tables (DANGER)."""
    confirm = typer.confirm("⚠️  This will DROP every table. Continue?")
    if not confirm:
        raise typer.Abort()
    from teamboard.db.session import drop_db, init_db

    drop_db()
    init_db()
    typer.echo("✅ Tables reset")


@teams_app.command("create")
def teams_create(
    name: str = typer.Argument(..., help="Team name"),
    member: List[str] = typer.Option([], "--member", "-m", help="Member email (repeatable)"),
):
    """Create a team, optionally adding existing users as members."""
    from teamboard.db.session import SessionLocal
    from teamboard.models.user import User
    from teamboard.services.team_service import team_service
    from teamboard.core.exceptions import TeamboardError

    db = SessionLocal()
    try:
        users = []
        for email in member:
            user = db.query(User).filter(User.email == email.strip().lower()).first()
            if not user:
                typer.echo(f"❌ No user with email {email}")
                raise typer.Exit(code=1)
            users.append(user)
        try:
            team = team_service.create(db, name)
            for user in users:
                team_service.add_member(db, team.id, user.id)
        except TeamboardError as e:
            typer.echo(f"❌ {e.message}")
            raise typer.Exit(code=1)
        typer.echo(f"✅ Created team [{team.id}] {team.name} with {len(users)} member(s)")
    finally:
        db.close()


@app.command("serve")
def serve(
    host: str = typer.Option("0.0.0.0", help="Host"),
    port: int = typer.Option(8000, help="Port"),
    reload: bool = typer.Option(True, help="Auto-reload"),
):
    """Start the FastAPI development server."""
    import uvicorn
    uvicorn.run("teamboard.main:app", host=host, port=port, reload=reload)


if __name__ == "__main__":
    app()
