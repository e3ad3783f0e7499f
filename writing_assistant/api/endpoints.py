# API endpoints for FastAPI app
from fastapi import APIRouter, Depends, Request

from writing_assistant.models.schemas import ActionCatalog, ActionOption, PromptRequest, PromptResponse
from writing_assistant.services.gateway import CompletionGateway
from writing_assistant.services.prompts import ACTIONS, TopicType

router = APIRouter()


def get_gateway(request: Request) -> CompletionGateway:
    return request.app.state.gateway


@router.get("/")
async def health_check():
    return {"message": "Welcome to the Writing Assistant API! It is running smoothly."}


@router.post("/api/prompt", response_model=PromptResponse)
async def prompt(req: PromptRequest, gateway: CompletionGateway = Depends(get_gateway)):
    completion = await gateway.complete(
        req.topic_type,
        req.prompt_type,
        req.question,
        req.content,
        temperature=req.temperature,
    )
    return PromptResponse(result=completion.text.strip())


@router.get("/api/actions", response_model=ActionCatalog, response_model_by_alias=True)
async def list_actions():
    return ActionCatalog(
        topic_types=[topic.value for topic in TopicType],
        actions=[
            ActionOption(
                prompt_type=action.kind.value,
                name=action.name,
                tooltip=action.tooltip,
                group=action.group,
                require_content=action.requires_content,
            )
            for action in ACTIONS
        ],
    )
