import logging

from fastapi import APIRouter, UploadFile, File, HTTPException

from app.core.config import get_settings
from app.core.errors import RegistryParseError
from app.core.pdf_extractor import extract_pdf_text
from app.core.text_parser import parse_registry_text

logger = logging.getLogger(__name__)

router = APIRouter(tags=["parse"])


@router.post(
    "/parse",
    summary="Parse Registry Extract",
    description="Extract a structured record from a registry extract (PDF with a text layer, or its plain-text rendering).",
    responses={
        200: {
            "description": "Successfully parsed extract",
            "content": {
                "application/json": {
                    "example": {
                        "name": {
                            "full": "ОБЩЕСТВО С ОГРАНИЧЕННОЙ ОТВЕТСТВЕННОСТЬЮ \"РОМАШКА\"",
                            "short": "ООО \"РОМАШКА\""
                        },
                        "registration": {"ogrn": "1027700132195", "date": "16.07.2002"},
                        "tax": {"inn": "7707083893", "kpp": "773601001"},
                        "type": "LE"
                    }
                }
            }
        },
        400: {"description": "Empty file uploaded"},
        413: {"description": "File too large"},
        415: {"description": "Unsupported file format"},
        422: {"description": "File has no extractable text, or the extract does not fit the registry schema"}
    }
)
async def parse_extract(
    file: UploadFile = File(..., description="Registry extract (PDF or TXT format)")
):
    """
    Parse a registry extract and return its sections.

    **Supported formats:**
    - PDF (.pdf) - Text-layer extraction only, OCR not supported
    - TXT (.txt) - Text rendering of the extract, UTF-8

    **Returns:**
    - one object per located section, field key -> value (absent fields omitted)
    - **type**: "LE" for a legal entity, "SE" for a sole entity
    - **kind**, **name**, **head**: sole entities only

    **Errors:** 422 with `error` set to UNKNOWN_ENTITY_TYPE, MISSING_START_BIT,
    MISSING_STOP_BIT or INCOMPLETE_HEAD when the extract does not fit the schema.
    """
    settings = get_settings()
    raw = await file.read()
    if not raw:
        raise HTTPException(status_code=400, detail="Empty file uploaded.")
    if len(raw) > settings.max_upload_bytes:
        raise HTTPException(status_code=413, detail=f"File exceeds {settings.max_upload_bytes} bytes.")

    filename = (file.filename or "").lower()
    content_type = (file.content_type or "").lower()

    # PDF
    if filename.endswith(".pdf") or content_type == "application/pdf":
        text = extract_pdf_text(raw, x_density=settings.pdf_x_density, y_density=settings.pdf_y_density)
        if not text.strip():
            raise HTTPException(
                status_code=422,
                detail="PDF appears to have no extractable text. OCR is not supported."
            )
    # Text
    elif content_type == "text/plain" or filename.endswith(".txt"):
        text = raw.decode("utf-8", errors="replace")
    else:
        raise HTTPException(status_code=415, detail=f"Unsupported content type: {file.content_type}")

    try:
        record = parse_registry_text(text)
    except RegistryParseError as exc:
        logger.warning(f"Extract {file.filename!r} rejected: {exc}")
        raise HTTPException(status_code=422, detail={"error": exc.kind.value, "message": str(exc)})

    return record.to_output()
