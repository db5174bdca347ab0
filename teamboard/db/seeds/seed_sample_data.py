"""Seed sample users, a team, projects and tasks for demo purposes."""

from sqlalchemy.orm import Session

from teamboard.core.security import hash_password
from teamboard.models.user import User
from teamboard.models.team import Team
from teamboard.models.project import Project
from teamboard.models.task import Task

SAMPLE_PASSWORD = "Passw0rd"


def seed_sample_data(db: Session) -> None:
    """Insert demo data unless the demo team already exists."""
    if db.query(Team).filter(Team.name == "Demo Team").first():
        print("ℹ️  Demo data already present, skipping.")
        return

    people = [
        ("Ada", "Lovelace", "ada@teamboard.local"),
        ("Alan", "Turing", "alan@teamboard.local"),
    ]
    users = []
    for first_name, last_name, email in people:
        user = db.query(User).filter(User.email == email).first()
        if not user:
            user = User(
                first_name=first_name,
                last_name=last_name,
                email=email,
                password_hash=hash_password(SAMPLE_PASSWORD),
            )
            db.add(user)
        users.append(user)

    team = Team(name="Demo Team", members=users)
    website = Project(name="Website", description="Public marketing site", members=users)
    landing = Project(name="Landing page", description="First sub-project of the site")
    website.projects.append(landing)
    team.projects.extend([website, landing])

    website.tasks.extend([
        Task(name="Pick a colour palette", assignee=users[0]),
        Task(name="Write copy", assignee=users[1]),
    ])
    landing.tasks.append(Task(name="Hero section", assignee=users[0], done=True))

    db.add(team)
    db.commit()
    print(f"✅ Seeded {len(users)} users, 1 team, 2 projects (password: {SAMPLE_PASSWORD})")
