"""
Control API - start, stop and watch a voice form filling session.
"""

import asyncio
from typing import Any, AsyncContextManager, Callable, Dict, List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from ...dialogue.controller import DialogueController
from ...errors import SessionAlreadyActive
from ...models.dialogue import SessionReport
from ...utils.logger import logger

SessionFactory = Callable[[str], AsyncContextManager[DialogueController]]


class StartRequest(BaseModel):
    url: str


class SessionStatus(BaseModel):
    active: bool
    url: Optional[str] = None
    phase: Optional[str] = None
    current_index: int = 0
    total_fields: int = 0
    outcomes: List[Dict[str, Any]] = []
    error: Optional[str] = None


class SessionRunner:
    """Runs at most one session in the background."""

    def __init__(self, session_factory: SessionFactory):
        self.session_factory = session_factory
        self.url: Optional[str] = None
        self.controller: Optional[DialogueController] = None
        self.task: Optional[asyncio.Task] = None
        self.error: Optional[str] = None

    def is_active(self) -> bool:
        return self.task is not None and not self.task.done()

    def start(self, url: str):
        if self.is_active():
            raise SessionAlreadyActive()
        self.url = url
        self.controller = None
        self.error = None
        self.task = asyncio.create_task(self._run(url))

    async def _run(self, url: str) -> Optional[SessionReport]:
        try:
            async with self.session_factory(url) as controller:
                self.controller = controller
                return await controller.run()
        except asyncio.CancelledError:
            raise
        except Exception as e:
            logger.error(f"Session for {url} failed: {e}")
            self.error = str(e)
            return None

    async def stop(self, timeout: float = 10.0):
        if not self.is_active():
            return
        if self.controller is not None:
            await self.controller.stop()
        else:
            self.task.cancel()
        await asyncio.wait([self.task], timeout=timeout)

    def status(self) -> SessionStatus:
        status = SessionStatus(active=self.is_active(), url=self.url, error=self.error)
        if self.controller is not None:
            report = self.controller.report
            status.phase = self.controller.phase.value
            status.current_index = self.controller.state.current_index
            status.total_fields = report.total_fields
            status.outcomes = [o.to_dict() for o in report.outcomes]
            if report.error and not status.error:
                status.error = str(report.error)
        return status


def create_app(session_factory: Optional[SessionFactory] = None) -> FastAPI:
    """Build the control API around a session factory."""
    if session_factory is None:
        from ...main import browser_session
        session_factory = browser_session

    app = FastAPI(title="Voice Form Filler")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    runner = SessionRunner(session_factory)
    app.state.runner = runner

    @app.get("/ping")
    async def ping():
        return {"status": "ready"}

    @app.post("/session/start")
    async def start_session(req: StartRequest):
        try:
            runner.start(req.url)
        except SessionAlreadyActive as e:
            raise HTTPException(status_code=409, detail=str(e))
        return {"status": "started", "url": req.url}

    @app.post("/session/stop")
    async def stop_session():
        if not runner.is_active():
            raise HTTPException(status_code=400, detail="No active session")
        await runner.stop()
        return {"status": "stopped"}

    @app.get("/session", response_model=SessionStatus)
    async def session_status():
        return runner.status()

    return app


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(create_app(), host="127.0.0.1", port=8000)
