"""Pedigree Editor Backend.

FastAPI server exposing person node editing with undo/redo history.
"""

import logging
import os

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger("pedigree")

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel
from dotenv import load_dotenv

from actions import DEFAULT_MAX_UNDO, ActionRecord
from editor import EditorContext
from nodes import AbstractPerson

# Load environment variables
load_dotenv()

MAX_UNDO = int(os.getenv("PEDIGREE_MAX_UNDO", DEFAULT_MAX_UNDO))

# Global state
editor = EditorContext(max_undo=MAX_UNDO)

app = FastAPI(
    title="Pedigree Editor",
    description="Person node editing with undo/redo history",
    version="1.0.0",
)


# Request/Response Models

class PersonCreateRequest(BaseModel):
    """Request to place a new person on the graph."""
    x: float
    y: float
    gender: str = "U"
    id: int | None = None


class GenderRequest(BaseModel):
    gender: str


class AdoptedRequest(BaseModel):
    adopted: bool


class PersonResponse(BaseModel):
    """Current state of a person node."""
    id: int
    type: str
    x: float
    y: float
    gender: str
    oppositeGender: str
    adopted: bool
    graphics: dict


class HistoryResponse(BaseModel):
    actions: list[ActionRecord]
    canUndo: bool
    canRedo: bool


def _person_response(person: AbstractPerson) -> PersonResponse:
    x, y = person.get_position()
    return PersonResponse(
        id=person.get_id(),
        type=person.get_type(),
        x=x,
        y=y,
        gender=person.get_gender().value,
        oppositeGender=person.get_opposite_gender().value,
        adopted=person.is_adopted(),
        graphics=person.get_graphics().describe(),
    )


def _get_person_or_404(person_id: int) -> AbstractPerson:
    person = editor.registry.get_node(person_id)
    if person is None:
        logger.warning(f"Person {person_id} not found")
        raise HTTPException(status_code=404, detail=f"Person with ID {person_id} not found")
    return person


# Endpoints

@app.get("/health")
async def health_check():
    """Health check endpoint."""
    logger.debug("Health check requested")
    return {
        "status": "healthy",
        "node_count": len(editor.registry),
    }


@app.post("/persons", response_model=PersonResponse)
async def create_person(request: PersonCreateRequest):
    """Place a new person on the graph."""
    if request.id is not None and editor.registry.get_node(request.id) is not None:
        raise HTTPException(status_code=400, detail=f"Person with ID {request.id} already exists")

    person = editor.add_person(request.x, request.y, request.gender, request.id)
    return _person_response(person)


@app.get("/persons")
async def list_persons():
    """Get all persons on the graph."""
    persons = [_person_response(p) for p in editor.registry.get_all_nodes()]
    logger.debug(f"Returning {len(persons)} persons")
    return {"persons": persons}


@app.get("/persons/{person_id}", response_model=PersonResponse)
async def get_person(person_id: int):
    return _person_response(_get_person_or_404(person_id))


@app.delete("/persons/{person_id}")
async def delete_person(person_id: int):
    """Remove a person. History entries referring to it become no-ops."""
    _get_person_or_404(person_id)
    editor.remove_person(person_id)
    return {"removed": person_id}


@app.put("/persons/{person_id}/gender", response_model=PersonResponse)
async def set_gender(person_id: int, request: GenderRequest):
    """Change the gender of a person (undoable)."""
    person = _get_person_or_404(person_id)
    logger.info(f"Setting gender of {person_id} to '{request.gender}'")
    person.set_gender_action(request.gender)
    return _person_response(person)


@app.put("/persons/{person_id}/adopted", response_model=PersonResponse)
async def set_adopted(person_id: int, request: AdoptedRequest):
    """Change the adoption status of a person (undoable)."""
    person = _get_person_or_404(person_id)
    logger.info(f"Setting adopted of {person_id} to {request.adopted}")
    person.set_adopted_action(request.adopted)
    return _person_response(person)


@app.get("/persons/{person_id}/properties")
async def get_properties(person_id: int):
    return _get_person_or_404(person_id).get_properties()


@app.put("/persons/{person_id}/properties", response_model=PersonResponse)
async def assign_properties(person_id: int, properties: dict):
    """Apply a property bag to a person. Not recorded in the history."""
    person = _get_person_or_404(person_id)
    if not person.assign_properties(properties):
        logger.warning(f"Could not assign properties to {person_id}: {properties}")
        raise HTTPException(status_code=400, detail="Invalid properties: 'gender' is required")
    return _person_response(person)


@app.post("/undo")
async def undo():
    """Undo the most recent change."""
    record = editor.action_stack.undo()
    if record is None:
        raise HTTPException(status_code=400, detail="Nothing to undo")
    return {"undone": record, "applied": editor.action_stack.last_applied}


@app.post("/redo")
async def redo():
    """Redo the most recently undone change."""
    record = editor.action_stack.redo()
    if record is None:
        raise HTTPException(status_code=400, detail="Nothing to redo")
    return {"redone": record, "applied": editor.action_stack.last_applied}


@app.get("/history", response_model=HistoryResponse)
async def get_history():
    stack = editor.action_stack
    return HistoryResponse(actions=stack.history(), canUndo=stack.can_undo(), canRedo=stack.can_redo())


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        app,
        host=os.getenv("PEDIGREE_HOST", "0.0.0.0"),
        port=int(os.getenv("PEDIGREE_PORT", "8000")),
    )
