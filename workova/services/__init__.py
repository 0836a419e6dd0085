"""
Service layer - business logic and orchestration.

Services contain the marketplace's business logic, coordinate between
repositories, and own every unit of work.

RULE: Routes call services. Services call repositories. Never the reverse.
"""
from workova.services.auth_service import AuthService
from workova.services.user_service import UserService
from workova.services.job_service import JobService
from workova.services.offer_service import OfferService
from workova.services.chat_service import ChatService
from workova.services.report_service import ReportService
from workova.services.feed_service import FeedService
from workova.services.demo_service import DemoService

__all__ = [
    "AuthService",
    "UserService",
    "JobService",
    "OfferService",
    "ChatService",
    "ReportService",
    "FeedService",
    "DemoService",
]
