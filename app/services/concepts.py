"""Wiring of the concept instances the routes work with."""

from dataclasses import dataclass

from motor.motor_asyncio import AsyncIOMotorDatabase

from app.config.profiling import DEFAULT_PROFILING_QUESTION, ProfilingQuestion
from app.services.authing_service import AuthingService
from app.services.posting_service import PostingService
from app.services.profiling_service import ProfilingService
from app.services.sessioning_service import SessioningService
from app.services.threading_service import ThreadingService
from app.utils.doc_collection import DocCollection


@dataclass
class Concepts:
    authing: AuthingService
    sessioning: SessioningService
    posting: PostingService
    threading: ThreadingService
    profiling: ProfilingService
    require_membership_to_post: bool = False


def build_concepts(
    database: AsyncIOMotorDatabase,
    profiling_question: ProfilingQuestion = DEFAULT_PROFILING_QUESTION,
    require_membership_to_post: bool = False,
) -> Concepts:
    """Create every concept over its own collection of ``database``."""
    return Concepts(
        authing=AuthingService(DocCollection(database["users"])),
        sessioning=SessioningService(),
        posting=PostingService(DocCollection(database["posts"])),
        threading=ThreadingService(DocCollection(database["threads"])),
        profiling=ProfilingService(DocCollection(database["profiles"]), profiling_question),
        require_membership_to_post=require_membership_to_post,
    )
