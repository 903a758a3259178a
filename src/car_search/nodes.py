"""
LangGraph nodes for the image search workflow.
"""

from langchain_core.runnables import RunnableConfig

from .errors import ConfigurationError, MalformedResponse
from .llm_extractor import parse_model_response
from .media.vision import encode_image
from .prompts import build_extraction_prompt
from .types import PipelineOutcome, State

PARSE_FAILED_MESSAGE = "Failed to parse AI response. Please try with a clearer image."

def encode_node(state: State) -> State:
    """Base64-encode the validated upload and attach the prompt."""
    payload = encode_image(state["artifact"])
    return {"payload": payload, "prompt": build_extraction_prompt()}

async def infer_node(state: State, config: RunnableConfig) -> State:
    """Call the vision model. The client comes from the run config, not globals."""
    client = (config.get("configurable") or {}).get("vision_client")
    if client is None:
        raise ConfigurationError("Vision client is not configured")
    raw = await client.infer(state["payload"], state["prompt"])
    return {"raw_response": raw}

def parse_node(state: State) -> State:
    """Parse model text; a malformed reply is recorded, not raised."""
    try:
        attrs = parse_model_response(state.get("raw_response"))
    except MalformedResponse as e:
        return {"attributes": None, "error": str(e)}
    print(f"DEBUG: Extracted attributes: {attrs.to_dict()}")
    return {"attributes": attrs, "error": None}

def accept_node(state: State) -> State:
    return {"outcome": PipelineOutcome.ok(state["attributes"])}

def reject_node(state: State) -> State:
    """Soft failure: log the raw reply and return a user-actionable message."""
    print(f"❌ Failed to parse AI response: {state.get('error')}")
    print(f"Raw response: {state.get('raw_response')}")
    return {"outcome": PipelineOutcome.fail(PARSE_FAILED_MESSAGE)}
