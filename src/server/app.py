from __future__ import annotations

import asyncio
from dataclasses import asdict
from typing import List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from dispatch import DispatchTiming, ElevatorBank, Request


class RiderRequest(BaseModel):
    origin: int
    destination: int
    direction: Optional[str] = None


class BankManager:
    def __init__(self, names: Optional[List[str]] = None, timing: Optional[DispatchTiming] = None) -> None:
        self.bank = ElevatorBank(names=tuple(names or ["A", "B"]), timing=timing or DispatchTiming.from_env())

    async def start(self) -> dict:
        self.bank.start()
        return self.current_state()

    async def stop(self) -> dict:
        self.bank.stop()
        # joining blocks; keep it off the event loop
        await asyncio.to_thread(self.bank.join, 5.0)
        return self.current_state()

    def current_state(self) -> dict:
        return self.bank.snapshot()

    def current_stats(self) -> dict:
        return asdict(self.bank.registry.get_current_stats())

    def submit(self, rider: RiderRequest) -> dict:
        if rider.direction is None:
            request = Request.between(rider.origin, rider.destination)
        else:
            request = Request(rider.origin, rider.direction, rider.destination)
        self.bank.submit(request)
        return {
            "id": request.request_id,
            "origin": request.origin_floor,
            "direction": request.direction.value,
            "destination": request.destination_floor,
        }


manager = BankManager()
app = FastAPI(title="Elevator Bank Dispatch API")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
async def on_startup() -> None:
    await manager.start()


@app.on_event("shutdown")
async def on_shutdown() -> None:
    await manager.stop()


@app.get("/state")
async def get_state() -> dict:
    return manager.current_state()


@app.get("/stats")
async def get_stats() -> dict:
    return manager.current_stats()


@app.post("/requests")
async def add_request(rider: RiderRequest) -> dict:
    try:
        return manager.submit(rider)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))


@app.post("/elevators/start")
async def start_elevators() -> dict:
    return await manager.start()


@app.post("/elevators/stop")
async def stop_elevators() -> dict:
    return await manager.stop()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("server.app:app", host="0.0.0.0", port=8000, reload=False)
