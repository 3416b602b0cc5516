from __future__ import annotations

import asyncio
import contextlib
import json
import logging
import os
from typing import Optional, Set

from fastapi import FastAPI, HTTPException, WebSocket, WebSocketDisconnect
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from simulation import Simulation, SimulationConfig, StateSnapshot

logger = logging.getLogger(__name__)


class RideRequestBody(BaseModel):
    start: int
    destination: int


class RandomBatchBody(BaseModel):
    count: int = Field(default=1, ge=0)


class AutoRunBody(BaseModel):
    steps: int = Field(default=10, ge=1)
    tick_interval: Optional[float] = Field(default=None, ge=0)


class SimulationManager:
    def __init__(self, config: Optional[SimulationConfig] = None) -> None:
        self.config = config or SimulationConfig()
        self.simulation = Simulation.from_config(self.config)
        self.tick_interval = self.config.step_delay_seconds
        self.clients: Set[WebSocket] = set()
        self._task: Optional[asyncio.Task] = None
        self._lock = asyncio.Lock()

    @property
    def auto_running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def start_auto(self, steps: int, tick_interval: Optional[float] = None) -> dict:
        if self.auto_running:
            raise ValueError("An automatic run is already in progress")
        interval = self.tick_interval if tick_interval is None else tick_interval
        logger.info("Starting automatic run of %d steps every %.2fs", steps, interval)
        self._task = asyncio.create_task(self._run(steps, interval))
        self._task.add_done_callback(self._report_auto_result)
        state = self.current_state()
        state["auto_steps"] = steps
        return state

    async def stop(self) -> None:
        if self._task:
            self._task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await self._task
            self._task = None

    async def _run(self, steps: int, interval: float) -> None:
        for _ in range(steps):
            async with self._lock:
                snapshot = self.simulation.step()
                payload = self.state_from(snapshot)
            await self.broadcast(payload)
            await asyncio.sleep(interval)

    def _report_auto_result(self, task: asyncio.Task) -> None:
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.error("Automatic run stopped: %s", exc, exc_info=exc)

    async def broadcast(self, payload: dict) -> None:
        message = json.dumps(payload)
        disconnected: Set[WebSocket] = set()
        for client in set(self.clients):
            try:
                await client.send_text(message)
            except WebSocketDisconnect:
                disconnected.add(client)
        for client in disconnected:
            await self.unregister(client)

    async def register(self, websocket: WebSocket) -> None:
        await websocket.accept()
        self.clients.add(websocket)
        await websocket.send_text(json.dumps(self.current_state()))

    async def unregister(self, websocket: WebSocket) -> None:
        if websocket in self.clients:
            self.clients.remove(websocket)
        with contextlib.suppress(Exception):
            await websocket.close()

    def current_state(self) -> dict:
        return self.state_from(self.simulation.status())

    def state_from(self, snapshot: StateSnapshot) -> dict:
        return {
            "step": self.simulation.step_count,
            "building": snapshot.to_dict(),
            "scheduler": self.simulation.building.scheduler_name,
        }

    async def add_request(self, start: int, destination: int) -> dict:
        async with self._lock:
            view = self.simulation.add_request(start, destination)
            state = self.current_state()
            state["added"] = view.to_dict()
            return state

    async def add_random(self, count: int) -> dict:
        async with self._lock:
            added = self.simulation.add_random(count)
            state = self.current_state()
            state["added"] = added
            return state

    async def step(self) -> dict:
        async with self._lock:
            snapshot = self.simulation.step()
            payload = self.state_from(snapshot)
        await self.broadcast(payload)
        return payload


def create_app(config: Optional[SimulationConfig] = None) -> FastAPI:
    manager = SimulationManager(config)

    @contextlib.asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        await manager.stop()

    app = FastAPI(title="SCAN Elevator Simulation API", lifespan=lifespan)
    app.state.manager = manager
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/state")
    async def get_state() -> dict:
        return manager.current_state()

    @app.get("/visualize")
    async def get_visualization() -> dict:
        snapshot = manager.simulation.visualize()
        state = manager.state_from(snapshot)
        state["floors"] = [
            {
                "floor": floor,
                "elevator": floor == snapshot.current_floor,
                "waiting": [str(view) for view in snapshot.waiting_at(floor)],
            }
            for floor in range(snapshot.floor_count, 0, -1)
        ]
        state["inside"] = [str(view) for view in snapshot.riding]
        return state

    @app.post("/requests")
    async def add_request(body: RideRequestBody) -> dict:
        try:
            return await manager.add_request(body.start, body.destination)
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc))

    @app.post("/requests/random")
    async def add_random(body: RandomBatchBody) -> dict:
        try:
            return await manager.add_random(body.count)
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc))

    @app.post("/step")
    async def step() -> dict:
        return await manager.step()

    @app.post("/auto")
    async def auto(body: AutoRunBody) -> dict:
        try:
            return await manager.start_auto(body.steps, body.tick_interval)
        except ValueError as exc:
            raise HTTPException(status_code=409, detail=str(exc))

    @app.websocket("/ws/stream")
    async def websocket_endpoint(websocket: WebSocket) -> None:
        await manager.register(websocket)
        try:
            while True:
                await websocket.receive_text()
        except WebSocketDisconnect:
            await manager.unregister(websocket)

    return app


def config_from_env() -> SimulationConfig:
    seed = os.environ.get("ELEVATOR_SEED")
    return SimulationConfig(
        num_floors=int(os.environ.get("ELEVATOR_FLOORS", SimulationConfig.num_floors)),
        random_seed=int(seed) if seed is not None else None,
        step_delay_seconds=float(
            os.environ.get("ELEVATOR_STEP_DELAY", SimulationConfig.step_delay_seconds)
        ),
    )


def app_from_env() -> FastAPI:
    """App factory for `uvicorn --factory server.app:app_from_env`."""
    return create_app(config_from_env())


def main() -> None:
    import uvicorn

    logging.basicConfig(level=logging.INFO)
    try:
        app = app_from_env()
    except ValueError as exc:
        raise SystemExit(f"Invalid server configuration: {exc}")
    uvicorn.run(app, host="0.0.0.0", port=8000, reload=False)


if __name__ == "__main__":
    main()
