"""
Relationship Chain API Server
=============================

Read API exposing the layered and tree views of one graph.
Nothing here changes the graph; chains arrive in request bodies.

Endpoints:
- GET  /health           -> Liveness
- GET  /api/v1/graph     -> Full graph + relationship labels
- GET  /api/v1/topology  -> Structural metrics
- POST /api/v1/layers    -> Layered view for a chain
- POST /api/v1/forest    -> Tree view for a chain and direction

Usage:
    uvicorn relchain.api.server:app --reload
"""
from contextlib import asynccontextmanager
from typing import List, Optional
import logging

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from ..config import AppConfig
from ..contracts.graph import KnowledgeGraph
from ..contracts.views import parse_direction
from ..core.topology import TopologyEngine
from ..data.school import SCHOOL_GRAPH
from ..domain.loader import load_graph_file
from ..engine import ChainViewEngine
from .mapper import map_forest, map_graph, map_layers, map_metrics

_LOGGER = logging.getLogger(__name__)


class ChainRequest(BaseModel):
    chain: List[str] = []


class ForestRequest(ChainRequest):
    direction: str = "forward"


def _resolve_graph(config: AppConfig) -> KnowledgeGraph:
    """Graph named by config, or the bundled school graph."""
    path = config.server.graph_path
    if not path:
        _LOGGER.info("No graph path configured; serving the school sample graph")
        return SCHOOL_GRAPH

    result = load_graph_file(path)
    if result.is_failure:
        _LOGGER.error("Failed to load graph: %s %s", result.error.code.name, result.error.message)
        raise RuntimeError(f"{result.error.code.name}: {result.error.message}")
    return result.value


def create_app(config: Optional[AppConfig] = None, graph: Optional[KnowledgeGraph] = None) -> FastAPI:
    """Build the API. An explicit `graph` bypasses configured loading."""
    config = config or AppConfig.from_env()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        served = graph if graph is not None else _resolve_graph(config)
        topology = TopologyEngine()
        topology.build_graph(served)

        app.state.graph = served
        app.state.topology = topology
        app.state.engine = ChainViewEngine(config.engine)
        _LOGGER.info("Serving graph with %d nodes", len(served.nodes))

        yield

        _LOGGER.info("Shutting down")
        topology.clear()

    app = FastAPI(
        title="Relationship Chain Views API",
        version="0.1.0",
        description="Layered and tree views of a knowledge graph",
        lifespan=lifespan
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["GET", "POST"],  # POST carries chain queries only
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health_check():
        return {"status": "online"}

    @app.get("/api/v1/graph")
    async def get_graph(request: Request):
        return map_graph(request.app.state.graph)

    @app.get("/api/v1/topology")
    async def get_topology(request: Request):
        return map_metrics(request.app.state.topology.compute_metrics())

    @app.post("/api/v1/layers")
    async def get_layers(body: ChainRequest, request: Request):
        state = request.app.state
        return map_layers(body.chain, state.engine.layers(state.graph, body.chain))

    @app.post("/api/v1/forest")
    async def get_forest(body: ForestRequest, request: Request):
        parsed = parse_direction(body.direction)
        if parsed.is_failure:
            raise HTTPException(status_code=422, detail={
                "code": parsed.error.code.name,
                "message": parsed.error.message,
                "context": parsed.error.context_dict(),
            })
        direction = parsed.value
        state = request.app.state
        forest = state.engine.forest(state.graph, body.chain, direction)
        return map_forest(body.chain, direction, forest)

    return app


app = create_app()
