"""
Report repository - append-only audit records.
"""
from workova.models.collection import REPORTS
from workova.repositories.base import CollectionRepository
from workova.schemas.report import Report


class ReportRepository(CollectionRepository[Report]):
    def __init__(self):
        super().__init__(REPORTS, Report)
