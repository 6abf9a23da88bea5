from .mongo_driver import MongoDriver

class DatabaseManager:
    _instance = None

    def __init__(self, settings):
        self.mongo = MongoDriver(
            settings.MONGO_URI,
            settings.MONGO_DB_NAME,
            server_selection_timeout_ms=settings.MONGO_SERVER_SELECTION_TIMEOUT_MS,
            retries=settings.MONGO_CONNECT_RETRIES,
            retry_delay=settings.MONGO_CONNECT_RETRY_DELAY,
        )

    @classmethod
    def get_instance(cls, settings=None):
        if cls._instance is None:
            if settings is None:
                from framework.config import settings as app_settings
                settings = app_settings
            cls._instance = cls(settings)
        return cls._instance

    @classmethod
    def reset_instance(cls):
        cls._instance = None
