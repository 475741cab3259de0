"""
Synthetic detection results.

Used when the demo runs without an Eden AI key or after the credits are
gone. The shape matches a real provider response; the values are random.
Pass a seeded random.Random to get reproducible output.
"""
import random
import re
from typing import Dict, List, Optional

from contentcheck.config import AI_DETECTION_PROVIDER, PLAGIARISM_PROVIDER
from contentcheck.utils.eden_client import DetectionCapability

SENTENCE_BOUNDARY = re.compile(r"(?<=[.?!])\s+")

AI_PLACEHOLDER_TEXT = "Sample text for AI detection"
PLAGIARISM_PLACEHOLDER_TEXT = "Sample text for plagiarism detection"

PLAGIARISM_THRESHOLD = 0.7

MOCK_SOURCES = [
    {
        "url": "https://scholar.google.com/scholar?q=artificial+intelligence+ethics",
        "content": "The ethical implications of artificial intelligence have become increasingly important "
                   "as AI systems become more sophisticated and integrated into society.",
        "score": 0.85,
    },
    {
        "url": "https://www.researchgate.net/publication/ai-ethics-2023",
        "content": "Recent developments in AI have raised significant concerns about bias, privacy, "
                   "and accountability in automated decision-making systems.",
        "score": 0.92,
    },
    {
        "url": "https://www.sciencedirect.com/science/article/ai-society",
        "content": "The impact of artificial intelligence on modern society extends beyond technological "
                   "advancement to fundamental changes in how we work and interact.",
        "score": 0.78,
    },
    {
        "url": "https://www.jstor.org/stable/ai-research",
        "content": "As AI systems become more prevalent, questions about their governance and regulation "
                   "have come to the forefront of public discourse.",
        "score": 0.88,
    },
    {
        "url": "https://www.medium.com/ai-ethics",
        "content": "The development of ethical AI requires collaboration between technologists, "
                   "policymakers, and ethicists to ensure responsible innovation.",
        "score": 0.75,
    },
]


def split_segments(text: str, placeholder: str = AI_PLACEHOLDER_TEXT) -> List[str]:
    segments = [s for s in SENTENCE_BOUNDARY.split(text) if s.strip()]
    if segments:
        return segments
    return [text or placeholder]


def get_mock_ai_detection_data(text: str, rng: Optional[random.Random] = None) -> Dict:
    rng = rng or random.Random()
    segments = split_segments(text, AI_PLACEHOLDER_TEXT)
    return {
        AI_DETECTION_PROVIDER: {
            "ai_score": 0.5,
            "items": [
                {
                    "text": segment,
                    "prediction": "ai-generated" if rng.random() > 0.5 else "human",
                    "ai_score": rng.random(),
                    "ai_score_detail": rng.random(),
                }
                for segment in segments
            ],
            "cost": 0,
        }
    }


def _mock_candidate(rng: random.Random) -> Dict:
    source = rng.choice(MOCK_SOURCES)
    return {
        "url": source["url"],
        "plagia_score": source["score"],
        "prediction": "plagiarized" if source["score"] > PLAGIARISM_THRESHOLD else "original",
        "plagiarized_text": source["content"],
    }


def get_mock_plagiarism_data(text: str, rng: Optional[random.Random] = None) -> Dict:
    rng = rng or random.Random()
    segments = split_segments(text, PLAGIARISM_PLACEHOLDER_TEXT)
    num_items = min(len(segments), rng.randint(3, 5))

    items = []
    for segment in segments[:num_items]:
        items.append({
            "text": segment,
            "candidates": [_mock_candidate(rng) for _ in range(rng.randint(1, 2))],
        })

    return {
        PLAGIARISM_PROVIDER: {
            "plagia_score": rng.randrange(5, 45),
            "items": items,
            "cost": 0,
        }
    }


def mock_result(capability: DetectionCapability, text: str, rng: Optional[random.Random] = None) -> Dict:
    if capability is DetectionCapability.PLAGIARISM_DETECTION:
        return get_mock_plagiarism_data(text, rng)
    return get_mock_ai_detection_data(text, rng)
