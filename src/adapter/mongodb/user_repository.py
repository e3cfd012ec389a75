"""MongoDB implementation of UserRepository."""

from logging import getLogger
from pymongo.database import Database
from pymongo.errors import DuplicateKeyError, PyMongoError
from adapter.mongodb.connection import USERS_COLLECTION_NAME
from domain.model.errors import DomainError, DuplicateError
from domain.model.user import Phone, User

logger = getLogger(__name__)


class MongoUserRepository:
    def __init__(self, db: Database):
        self.collection = db[USERS_COLLECTION_NAME]

    def ensure_indexes(self) -> bool:
        """Create indexes for users collection."""
        from adapter.mongodb.indexes import create_index_safe

        try:
            create_index_safe(self.collection, [('email', 1)], 'idx_users_email', unique=True)
            create_index_safe(self.collection, [('created', -1)], 'idx_users_created')
            return True
        except PyMongoError as e:
            logger.error("Failed to create users indexes", extra={"error": str(e)})
            return False

    # ── mapping ──────────────────────────────────────────────

    @staticmethod
    def _to_document(user: User) -> dict:
        return {
            '_id': user.id,
            'name': user.name,
            'email': user.email,
            'password_hash': user.password_hash,
            'phones': [
                {
                    'number': phone.number,
                    'city_code': phone.city_code,
                    'country_code': phone.country_code,
                }
                for phone in user.phones
            ],
            'created': user.created,
            'last_login': user.last_login,
            'active': user.active,
        }

    @staticmethod
    def _to_domain(doc: dict) -> User:
        """Convert MongoDB document to User domain model."""
        return User(
            id=doc['_id'],
            name=doc.get('name'),
            email=doc['email'],
            password_hash=doc['password_hash'],
            phones=[
                Phone(
                    number=p['number'],
                    city_code=p['city_code'],
                    country_code=p['country_code'],
                )
                for p in doc.get('phones', [])
            ],
            created=doc['created'],
            last_login=doc.get('last_login'),
            active=doc.get('active', True),
        )

    # ── write operations ─────────────────────────────────────

    def save(self, user: User) -> User:
        """Upsert user by ID. The unique email index rejects a second owner."""
        doc = self._to_document(user)
        try:
            self.collection.replace_one({'_id': user.id}, doc, upsert=True)
        except DuplicateKeyError:
            logger.warning("User save rejected: email already exists", extra={"email": user.email})
            raise DuplicateError(f"User with email {user.email} already exists")
        except PyMongoError as e:
            logger.error("Failed to save user", extra={"userId": user.id, "error": str(e)})
            raise DomainError("Failed to save user") from e

        logger.debug("User saved", extra={"userId": user.id})
        return self._to_domain(doc)

    # ── read operations ──────────────────────────────────────

    def find_by_email(self, email: str) -> User | None:
        try:
            doc = self.collection.find_one({'email': email})
        except PyMongoError as e:
            logger.error("Failed to get user by email", extra={"email": email, "error": str(e)})
            raise DomainError("Failed to read user directory") from e
        return self._to_domain(doc) if doc else None

    def exists_by_email(self, email: str) -> bool:
        try:
            return self.collection.count_documents({'email': email}, limit=1) > 0
        except PyMongoError as e:
            logger.error("Failed to check user existence", extra={"email": email, "error": str(e)})
            raise DomainError("Failed to read user directory") from e
