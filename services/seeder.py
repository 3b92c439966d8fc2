# app/services/seeder.py
from __future__ import annotations
from datetime import date, timedelta

from passlib.context import CryptContext
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from enums import ProjectStatus, ProjectPriority
from models import User, Project
from services import config

pwd_ctx = CryptContext(schemes=["bcrypt"], deprecated="auto")

DEMO_PROJECTS = [
    ("Website redesign", "Nieuwe huisstijl en landingspagina's", ProjectStatus.ACTIEF, ProjectPriority.HOOG, 12500.0),
    ("Klantportaal", "Self-service omgeving voor klanten", ProjectStatus.CONCEPT, ProjectPriority.NORMAAL, 30000.0),
    ("Data migratie", "Oude CRM-gegevens overzetten", ProjectStatus.VOLTOOID, ProjectPriority.URGENT, 8000.0),
    ("Mobiele app", "iOS en Android app voor medewerkers", ProjectStatus.ACTIEF, ProjectPriority.NORMAAL, 45000.0),
    ("Intranet", None, ProjectStatus.GEANNULEERD, ProjectPriority.LAAG, None),
    ("Rapportage dashboard", "Maandelijkse KPI-rapportage", ProjectStatus.CONCEPT, ProjectPriority.HOOG, 5200.0),
]

async def seed_admin(session: AsyncSession, logger=print) -> User:
    user = await session.scalar(select(User).where(User.email == config.ADMIN_EMAIL))
    if user:
        return user
    user = User(
        name=config.ADMIN_NAME,
        email=config.ADMIN_EMAIL,
        hashed_password=pwd_ctx.hash(config.ADMIN_PASSWORD),
    )
    session.add(user)
    await session.flush()
    logger(f"[seed] created admin user {user.email}")
    return user

async def seed_if_empty(session: AsyncSession, logger=print):
    owner = await seed_admin(session, logger=logger)
    projects_count = await session.scalar(
        select(func.count()).select_from(Project).where(Project.user_id == owner.id)
    )

    logger(f"[seed] counts => projects={projects_count}")

    if projects_count:
        logger("[seed] already populated, skipping.")
        await session.commit()
        return

    start = date.today()
    for i, (name, description, status, priority, budget) in enumerate(DEMO_PROJECTS):
        session.add(Project(
            user_id=owner.id,
            name=name,
            description=description,
            status=status,
            priority=priority,
            budget=budget,
            start_date=start + timedelta(days=7 * i),
            end_date=start + timedelta(days=7 * i + 60),
        ))
    await session.commit()

    logger(f"[seed] created projects={len(DEMO_PROJECTS)}")
