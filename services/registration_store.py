import logging
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from api.models.registration import Registration
from database.models import Registration as RegistrationRecord, generate_id
from services.exceptions import StoreError

logger = logging.getLogger(__name__)


class RegistrationStore:
    """Запись проверенных регистраций в БД. Только вставка, без чтения."""

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    def create(self, registration: Registration) -> str:
        """
        Сохранить регистрацию одной строкой в одной транзакции

        Returns:
            Идентификатор новой записи

        Raises:
            StoreError: при любой ошибке БД (без повторных попыток)
        """
        registration_id = generate_id()
        record = RegistrationRecord(
            id=registration_id,
            event=registration.event,
            team_name=registration.team_name,
            team_leader=registration.team_leader,
            phone_no=registration.phone_no,
            email=registration.email,
            roll_no=registration.roll_no,
            members=list(registration.members),
        )

        db = self._session_factory()
        try:
            db.add(record)
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error saving registration for team {registration.team_name!r}: {e}", exc_info=True)
            raise StoreError(e) from e
        finally:
            db.close()

        logger.info(f"Registration {registration_id} saved for team {registration.team_name!r}")
        return registration_id
