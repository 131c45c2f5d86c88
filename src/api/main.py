"""
FastAPI backend: REST API over the address book.
Run with uvicorn: uvicorn api.main:app --reload
"""

import logging
from pathlib import Path

from dotenv import load_dotenv

# Load .env from repo root (when run from repo root or from Docker)
for path in (
    Path(__file__).resolve().parent.parent.parent / ".env",
    Path.cwd() / ".env",
):
    if path.exists():
        load_dotenv(path)
        break

from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from feebook.application import AddCommand, CommandError, ContactNotFoundError, Logic
from feebook.domain import Contact, MonthPaid, Tag
from feebook.infrastructure import ModelManager, load_settings, sample_contacts

settings = load_settings()

logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=getattr(logging, settings.log_level, logging.INFO),
)
logger = logging.getLogger(__name__)


def _build_logic() -> Logic:
    contacts = sample_contacts() if settings.sample_data else []
    model = ModelManager(contacts, phone_region=settings.phone_region)
    logger.info("Address book ready with %d contacts", len(contacts))
    return Logic(model)


def get_logic(app: FastAPI) -> Logic:
    if getattr(app.state, "logic", None) is None:
        app.state.logic = _build_logic()
    return app.state.logic


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.logic = _build_logic()
    yield


app = FastAPI(title="feebook API", lifespan=lifespan)


# --- REST: health ---


@app.get("/health")
def health():
    return {"status": "ok"}


# --- REST: contacts ---


class CreateContactBody(BaseModel):
    name: str
    phone: str
    email: str
    address: str
    fees: str
    class_id: str
    months_paid: list[str] = []
    tags: list[str] = []


class ContactItem(BaseModel):
    index: int
    name: str
    phone: str
    email: str
    address: str
    fees: str
    class_id: str
    months_paid: list[str]
    tags: list[str]


class CommandBody(BaseModel):
    command: str


@app.get("/contacts")
def list_contacts(request: Request):
    logic = get_logic(request.app)
    return [
        ContactItem(
            index=i,
            name=c.name,
            phone=c.phone,
            email=c.email,
            address=c.address,
            fees=c.fees,
            class_id=c.class_id,
            months_paid=[str(m) for m in c.sorted_months_paid()],
            tags=[t.name for t in c.sorted_tags()],
        )
        for i, c in enumerate(logic.get_filtered_contact_list(), start=1)
    ]


@app.post("/contacts")
def create_contact(body: CreateContactBody, request: Request):
    logic = get_logic(request.app)
    try:
        contact = Contact(
            name=body.name,
            phone=body.phone,
            email=body.email,
            address=body.address,
            fees=body.fees,
            class_id=body.class_id,
            months_paid=frozenset(MonthPaid.parse(m) for m in body.months_paid),
            tags=frozenset(Tag(t) for t in body.tags),
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    command = AddCommand(contact)
    try:
        result = logic.execute_command(command)
    except CommandError as e:
        if e.message == AddCommand.MESSAGE_DUPLICATE_CONTACT:
            raise HTTPException(status_code=409, detail=e.message) from e
        raise HTTPException(status_code=400, detail=e.message) from e
    return JSONResponse(content={"feedback": result.feedback}, status_code=201)


# --- REST: free-text commands ---


@app.post("/commands")
def run_command(body: CommandBody, request: Request):
    logic = get_logic(request.app)
    try:
        result = logic.execute(body.command)
    except CommandError as e:
        raise HTTPException(status_code=400, detail=e.message) from e
    except ContactNotFoundError as e:
        logger.warning("Contact changed while running %r: %s", body.command, e)
        raise HTTPException(
            status_code=409, detail="The contact was changed by another request, try again"
        ) from e
    return {"feedback": result.feedback}
