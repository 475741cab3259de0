from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional


class ProviderModel(BaseModel):
    # Eden AI adds provider-specific fields; keep them in the response
    model_config = ConfigDict(extra="allow")


# ---- AI detection ----

class AIDetectionItem(ProviderModel):
    text: str
    prediction: str     # "ai-generated" or "human"
    ai_score: float
    ai_score_detail: Optional[float] = None


class AIDetectionResult(ProviderModel):
    ai_score: float
    items: List[AIDetectionItem] = Field(default_factory=list)
    cost: float = 0


class AIDetectionResponse(ProviderModel):
    winstonai: AIDetectionResult


# ---- Plagiarism detection ----

class PlagiarismCandidate(ProviderModel):
    url: str
    plagia_score: float
    prediction: str     # "plagiarized" or "original"
    plagiarized_text: str


class PlagiarismItem(ProviderModel):
    text: str
    candidates: List[PlagiarismCandidate] = Field(default_factory=list)


class PlagiarismResult(ProviderModel):
    plagia_score: float
    items: List[PlagiarismItem] = Field(default_factory=list)
    cost: float = 0


class PlagiarismResponse(ProviderModel):
    originalityai: PlagiarismResult


# ---- Requests ----

class AIDetectionRequest(BaseModel):
    text: str
    use_mock: Optional[bool] = None


class PlagiarismDetectionRequest(BaseModel):
    text: str
    title: str = ""
    use_mock: Optional[bool] = None


class SampleText(BaseModel):
    title: str
    text: str


class ExtractionResponse(BaseModel):
    filename: Optional[str] = None
    media_type: str
    text: str
    word_count: int
    ideal_length: bool
