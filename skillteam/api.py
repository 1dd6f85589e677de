"""SkillTeam: FastAPI backend.

Thin HTTP layer over the composition engine and the analyzer. Every typed
failure is returned as ``{"error": message}`` with the status code attached
to its exception class.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
import random

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import BaseModel, StrictInt

from skillteam.engine.analysis import AnalysisOrchestrator, TextGenerator
from skillteam.engine.composition import TeamCompositionEngine
from skillteam.engine.tag_resolver import TagResolver
from skillteam.errors import TeamEngineError, TeamNotFound, UserNotFound
from skillteam.llm_config import create_text_generator
from skillteam.repository import TeamRepository
from skillteam.settings import AppSettings
from skillteam.store import DocumentStore


logger = logging.getLogger(__name__)

DEFAULT_PORT = 3000


# ── Wiring ──────────────────────────────────────────────────────────────────

@dataclass
class Services:
    repository: TeamRepository
    tags: TagResolver
    composer: TeamCompositionEngine
    analyzer: AnalysisOrchestrator


def build_services(
    settings: AppSettings,
    generator: TextGenerator | None = None,
    rng: random.Random | None = None,
) -> Services:
    """Assemble the store, repository and engines from *settings*.

    *generator* overrides the configured LLM client (tests pass a fake).
    """
    repository = TeamRepository(DocumentStore(settings.data_dir))
    tags = TagResolver(repository)
    if generator is None:
        generator = create_text_generator(settings)
    return Services(
        repository=repository,
        tags=tags,
        composer=TeamCompositionEngine(repository, rng=rng),
        analyzer=AnalysisOrchestrator(repository, tags, generator, settings.analysis),
    )


# ── Request bodies ──────────────────────────────────────────────────────────

class GenerateTeamRequest(BaseModel):
    postId: str | None = None
    memberCount: StrictInt | None = None


class AnalyzeTeamRequest(BaseModel):
    teamId: str | None = None


# ── App ─────────────────────────────────────────────────────────────────────

def create_app(services: Services) -> FastAPI:
    app = FastAPI(title="SkillTeam API", version="0.1.0")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["Content-Type", "Authorization"],
    )

    @app.exception_handler(TeamEngineError)
    async def handle_engine_error(request: Request, exc: TeamEngineError) -> JSONResponse:
        if exc.http_status >= 500:
            logger.error("%s %s failed: %s %s", request.method, request.url.path, exc.message, exc.details)
        else:
            logger.info("%s %s rejected: %s", request.method, request.url.path, exc.message)
        return JSONResponse(status_code=exc.http_status, content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def handle_bad_request(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"error": "Malformed request body"})

    @app.get("/api/tags/search")
    def search_tags(q: str = ""):
        return [tag.model_dump() for tag in services.tags.search(q)]

    @app.get("/api/users")
    def list_users():
        return [user.model_dump() for user in services.repository.get_all_users()]

    @app.get("/api/users/{user_id}")
    def get_user(user_id: str):
        user = services.repository.get_user(user_id)
        if user is None:
            raise UserNotFound(user_id)
        return user.model_dump()

    @app.post("/api/teams/generate", status_code=201)
    def generate_team(body: GenerateTeamRequest):
        team = services.composer.compose_team(body.postId, body.memberCount)
        return {"message": "团队生成成功", "team": team.to_response()}

    @app.get("/api/teams/{team_id}")
    def get_team(team_id: str):
        team = services.repository.get_team(team_id)
        if team is None:
            raise TeamNotFound(team_id)
        return team.to_response()

    @app.post("/api/ai/analyze-team")
    def analyze_team(body: AnalyzeTeamRequest):
        result = services.analyzer.analyze_team(body.teamId)
        return {"message": "团队分析完成", "teamId": result.team_id, "analysis": result.analysis}

    @app.get("/test", response_class=PlainTextResponse)
    def health():
        return "服务器正常运行！"

    return app


def main() -> None:
    import uvicorn

    load_dotenv()
    settings = AppSettings.from_env()
    logging.basicConfig(level=getattr(logging, settings.log_level.upper(), logging.INFO))
    app = create_app(build_services(settings))
    logger.info("Serving SkillTeam API on port %d (data dir: %s)", DEFAULT_PORT, settings.data_dir)
    uvicorn.run(app, host="0.0.0.0", port=DEFAULT_PORT)


if __name__ == "__main__":
    main()
