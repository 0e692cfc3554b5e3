import logging
from typing import List

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from dsr_api.utils.config import RESOURCE_NAME
from dsr_api.utils.reference_data import (
    ProcessTypeEntry,
    UnknownProcessTypeError,
    get_process_type,
    list_process_types,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix=f"/api/{RESOURCE_NAME}", tags=[RESOURCE_NAME])


class ProcessType(BaseModel):
    code: str = Field(alias="Code")
    description: str = Field(alias="Description")

    @classmethod
    def from_entry(cls, entry: ProcessTypeEntry) -> "ProcessType":
        return cls(Code=entry.code, Description=entry.description)


class ProcessTypesResponse(BaseModel):
    process_types: List[ProcessType] = Field(alias="ProcessTypes")


@router.get("/getProcessTypes", response_model=ProcessTypesResponse)
def get_process_types():
    """Return every process type in table order."""
    entries = list_process_types()
    logger.info("Serving %d process types", len(entries))
    return ProcessTypesResponse(
        ProcessTypes=[ProcessType.from_entry(e) for e in entries]
    )


@router.get("/getProcessTypes/{code}", response_model=ProcessType)
def get_process_type_by_code(code: str):
    try:
        entry = get_process_type(code)
    except UnknownProcessTypeError as e:
        logger.warning("Process type lookup failed: %s", code)
        raise HTTPException(status_code=404, detail=str(e))
    return ProcessType.from_entry(entry)
