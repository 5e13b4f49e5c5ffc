from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.models.resume_models import ResumeRequest
from app.services.gemini_client import GeminiClient
from app.services.resume_service import generate_resume_response
from app.utils.dependencies import get_gemini_client

router = APIRouter()


@router.post("/generate")
async def generate_resume(
    req: ResumeRequest,
    client: GeminiClient = Depends(get_gemini_client),
):
    """
    Generate a resume from a free-text description.

    Always answers 200: upstream and parsing failures come back in the body
    as {"error": ...} or {"response": <raw text>} instead of a status code.
    """
    parsed = await generate_resume_response(req.user_description, client=client)
    return JSONResponse(content=parsed.data, status_code=200)
