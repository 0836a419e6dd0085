"""
Pydantic schemas for stored records and request/response bodies.
"""
from workova.schemas.base import BaseSchema, MessageResponse
from workova.schemas.account import Account, Session, WorkerProfile
from workova.schemas.job import Job, JobWithOfferCount
from workova.schemas.offer import Offer
from workova.schemas.chat import Chat, Message
from workova.schemas.report import Report

__all__ = [
    "BaseSchema",
    "MessageResponse",
    "Account",
    "Session",
    "WorkerProfile",
    "Job",
    "JobWithOfferCount",
    "Offer",
    "Chat",
    "Message",
    "Report",
]
