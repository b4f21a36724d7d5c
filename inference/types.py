from dataclasses import dataclass, field
from typing import Optional, Dict, Any, List, Literal

CompletionStatus = Literal["success", "error"]
ChatRole = Literal["system", "user", "assistant"]
ProviderErrorKind = Literal["unauthorized", "rate_limited", "other", "transport"]


@dataclass
class ChatMessage:
    role: ChatRole
    content: str

    def to_dict(self) -> Dict[str, str]:
        return {"role": self.role, "content": self.content}


@dataclass
class CompletionRequest:
    messages: List[ChatMessage]
    model: str
    temperature: float
    api_key: str
    timeout_s: Optional[float] = None  # None: wait for the provider
    trace_id: Optional[str] = None


@dataclass
class ProviderError:
    """
    Closed set of provider failure kinds.

    unauthorized  -> provider rejected the credential (HTTP 401)
    rate_limited  -> HTTP 429 or a quota-exhausted error code
    other         -> any other provider-reported failure
    transport     -> no usable provider answer (network, bad body)
    """

    kind: ProviderErrorKind
    message: Optional[str] = None
    status_code: Optional[int] = None


@dataclass
class CompletionResponse:
    status: CompletionStatus
    output: Optional[str] = None
    error: Optional[ProviderError] = None
    metadata: Dict[str, Any] = field(default_factory=dict)
