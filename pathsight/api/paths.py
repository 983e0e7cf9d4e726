"""POST /api/paths/* — parse, convert, measure and transform path data.

Handlers are plain ``def`` so FastAPI runs the numeric work in its thread
pool. Path errors surface through the exception handler in ``main``.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from pathsight.commander import PathCommander
from pathsight.config import Settings
from pathsight.dependencies import get_settings
from pathsight.engine import get_registry
from pathsight.models.requests import ConvertRequest, PathRequest, PointRequest, TransformRequest
from pathsight.models.responses import (
    BoundingBoxModel,
    ConvertResponse,
    MeasureResponse,
    PathResponse,
    PointResponse,
    SplitResponse,
)
from pathsight.models.segment import Path
from pathsight.svg.parser import parse
from pathsight.svg.serializer import round_path, serialize

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/paths")


def _precision(request: PathRequest, settings: Settings) -> int | None:
    if request.precision is None:
        return settings.precision
    return request.precision if request.precision >= 0 else None


def _path_response(path: Path, precision: int | None) -> dict:
    return {
        "path": serialize(path, precision),
        "segments": round_path(path, precision).to_list(),
    }


@router.post("/parse", response_model=PathResponse)
def parse_path(request: PathRequest, settings: Settings = Depends(get_settings)) -> PathResponse:
    path = parse(request.path)
    return PathResponse(**_path_response(path, _precision(request, settings)))


@router.post("/convert", response_model=ConvertResponse)
def convert_path(
    request: ConvertRequest, settings: Settings = Depends(get_settings)
) -> ConvertResponse:
    registry = get_registry()
    if request.form not in registry.names():
        raise HTTPException(
            status_code=400,
            detail=f"Unknown form {request.form!r}, expected one of {registry.names()}",
        )
    precision = _precision(request, settings)
    path = registry.run(
        request.form,
        parse(request.path),
        # False keeps full precision, None would fall back to the default
        precision=False if precision is None else precision,
        only_subpaths=request.only_subpaths,
    )
    logger.info("Converted path to %s (%d segments)", request.form, len(path))
    return ConvertResponse(form=request.form, **_path_response(path, precision))


@router.post("/measure", response_model=MeasureResponse)
def measure_path(request: PathRequest) -> MeasureResponse:
    commander = PathCommander(request.path)
    return MeasureResponse(
        bbox=BoundingBoxModel(**commander.bbox().to_dict()),
        length=commander.length(),
        area=commander.area(),
        direction=commander.draw_direction().value,
    )


@router.post("/point", response_model=PointResponse)
def point_on_path(request: PointRequest) -> PointResponse:
    x, y = PathCommander(request.path).point_at_length(request.length)
    return PointResponse(x=x, y=y)


@router.post("/transform", response_model=PathResponse)
def transform_path(
    request: TransformRequest, settings: Settings = Depends(get_settings)
) -> PathResponse:
    precision = _precision(request, settings)
    commander = PathCommander(request.path, precision=precision)
    commander.transform(request.transform)
    return PathResponse(**_path_response(commander.segments, precision))


@router.post("/split", response_model=SplitResponse)
def split_path(request: PathRequest, settings: Settings = Depends(get_settings)) -> SplitResponse:
    precision = _precision(request, settings)
    parts = PathCommander(request.path).split()
    return SplitResponse(paths=[serialize(part, precision) for part in parts])
