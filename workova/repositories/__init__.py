"""
Repository layer - data access over stored collections.

Repositories know how records are laid out in the store. They never
commit: services own the unit of work.
"""
from workova.repositories.base import CollectionRepository
from workova.repositories.account_repository import (
    AccountRepository,
    SessionRepository,
    WorkerProfileRepository,
)
from workova.repositories.job_repository import JobRepository
from workova.repositories.offer_repository import OfferRepository
from workova.repositories.chat_repository import ChatRepository, MessageRepository
from workova.repositories.report_repository import ReportRepository

__all__ = [
    "CollectionRepository",
    "AccountRepository",
    "SessionRepository",
    "WorkerProfileRepository",
    "JobRepository",
    "OfferRepository",
    "ChatRepository",
    "MessageRepository",
    "ReportRepository",
]
