from repositories.waitlist import SqlAlchemyWaitlistRepository, WaitlistRepository

__all__ = ["SqlAlchemyWaitlistRepository", "WaitlistRepository"]
