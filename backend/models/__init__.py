from models.waitlist_entry import WaitlistEntry

__all__ = ["WaitlistEntry"]
