"""PostgreSQL-backed patient store."""

import logging
from datetime import datetime
from typing import List, Optional

from sqlalchemy import select, update, func
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from common.models import Patient
from triage import NewPatient, PatientRecord, WAITING, lifecycle_changes

logger = logging.getLogger(__name__)


def to_record(row: Patient) -> PatientRecord:
    """Convert an ORM row to a queue engine record."""
    return PatientRecord(
        id=row.id,
        name=row.name,
        age=row.age,
        symptoms=row.symptoms,
        pain_level=row.pain_level,
        notes=row.notes,
        priority_class=row.priority_class,
        status=row.status,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


class SQLPatientStore:
    """Patient store over an async SQLAlchemy session factory.

    Every operation runs in its own session, so the waiting set is read
    with a single SELECT and each update is a single UPDATE ... RETURNING.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self.session_factory = session_factory

    async def fetch_waiting_patients(self) -> List[PatientRecord]:
        async with self.session_factory() as session:
            result = await session.scalars(select(Patient).where(Patient.status == WAITING))
            return [to_record(row) for row in result]

    async def fetch_all_patients(self) -> List[PatientRecord]:
        async with self.session_factory() as session:
            result = await session.scalars(select(Patient).order_by(Patient.id))
            return [to_record(row) for row in result]

    async def fetch_patient_by_id(self, patient_id: int) -> Optional[PatientRecord]:
        async with self.session_factory() as session:
            row = await session.get(Patient, patient_id)
            return to_record(row) if row is not None else None

    async def insert_patient(self, fields: NewPatient) -> PatientRecord:
        async with self.session_factory() as session:
            row = Patient(
                name=fields.name,
                age=fields.age,
                symptoms=fields.symptoms,
                pain_level=fields.pain_level,
                notes=fields.notes,
                priority_class=fields.priority_class,
                status=fields.status,
            )
            session.add(row)
            await session.commit()
            await session.refresh(row)
            logger.debug(f"Inserted patient {row.id}")
            return to_record(row)

    async def persist_lifecycle_update(
        self,
        patient_id: int,
        status: Optional[str] = None,
        priority_class: Optional[int] = None,
    ) -> Optional[PatientRecord]:
        values = {**lifecycle_changes(status, priority_class), "updated_at": func.now()}

        async with self.session_factory() as session:
            stmt = (
                update(Patient)
                .where(Patient.id == patient_id)
                .values(**values)
                .returning(Patient)
                .execution_options(synchronize_session=False)
            )
            row = (await session.scalars(stmt)).one_or_none()
            if row is None:
                await session.rollback()
                return None
            record = to_record(row)
            await session.commit()
            return record

    async def ping(self) -> datetime:
        async with self.session_factory() as session:
            return await session.scalar(select(func.now()))
