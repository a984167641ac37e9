from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

SYSTEM_INSTRUCTION = """
You are an AI Full-Stack Project Builder for Students.
Your task is to convert ANY project idea, even very simple ones (example: "Build a calculator"), into a MANDATORY FULL-STACK APPLICATION.

IMPORTANT RULE (NON-NEGOTIABLE):
Every project MUST include:
1. A Frontend (HTML/CSS/JS)
2. A Backend (Python Flask)
3. At least one REST API Endpoint

Even if the project logically does not require a backend (like a calculator), you MUST still create one for academic learning purposes. The calculation/logic MUST happen on the server.

FOLDER STRUCTURE REQUIREMENTS:
You must strictly follow this structure:
project_name/
├── frontend/
│   ├── index.html
│   ├── style.css
│   └── script.js
└── backend/
    ├── app.py
    └── requirements.txt

CODE REQUIREMENTS:
- 'app.py' MUST contain a runnable Flask app with CORS enabled.
- 'script.js' MUST use `fetch()` to call the backend API.
- 'requirements.txt' MUST include `flask` and `flask-cors`.
- All code must be complete and copy-paste ready.

OUTPUT SECTIONS:
1. Project Title & Overview
2. Tech Stack (Fixed: HTML/CSS/JS + Python Flask)
3. Folder Structure
4. Files (Full content)
5. API Flow Explanation (Endpoints, Request/Response format)
6. How to Run (Step-by-step for both terminal and browser)
7. Logic Explanation
8. Viva Questions
9. Future Enhancements
"""

RESPONSE_MIME_TYPE = "application/json"

# Gemini schema dialect: upper-case OpenAPI type names.
PROJECT_SCHEMA: Dict[str, Any] = {
    "type": "OBJECT",
    "properties": {
        "projectTitle": {"type": "STRING"},
        "domain": {"type": "STRING"},
        "techStack": {"type": "STRING"},
        "folderStructure": {
            "type": "STRING",
            "description": "ASCII representation of folder structure with frontend and backend folders",
        },
        "files": {
            "type": "ARRAY",
            "items": {
                "type": "OBJECT",
                "properties": {
                    "fileName": {"type": "STRING", "description": "Relative path, e.g., 'backend/app.py'"},
                    "code": {"type": "STRING"},
                    "language": {"type": "STRING"},
                },
                "required": ["fileName", "code", "language"],
            },
        },
        "apiFlowExplanation": {
            "type": "STRING",
            "description": "Explanation of the API endpoints created, request format, and response format.",
        },
        "howToRun": {
            "type": "ARRAY",
            "items": {"type": "STRING"},
            "description": (
                "Step-by-step instructions on how to setup folders, install python requirements, "
                "run flask, and open frontend."
            ),
        },
        "conceptExplanation": {
            "type": "STRING",
            "description": "Why a backend is used and how data flows.",
        },
        "vivaQuestions": {
            "type": "ARRAY",
            "items": {
                "type": "OBJECT",
                "properties": {
                    "question": {"type": "STRING"},
                    "answer": {"type": "STRING"},
                },
                "required": ["question", "answer"],
            },
        },
        "futureEnhancements": {"type": "ARRAY", "items": {"type": "STRING"}},
    },
    "required": [
        "projectTitle",
        "domain",
        "techStack",
        "folderStructure",
        "files",
        "apiFlowExplanation",
        "howToRun",
        "conceptExplanation",
        "vivaQuestions",
        "futureEnhancements",
    ],
}


@dataclass
class GenerationRequest:
    model: str
    prompt: str
    system_instruction: str = SYSTEM_INSTRUCTION
    response_mime_type: str = RESPONSE_MIME_TYPE
    response_schema: Dict[str, Any] = field(default_factory=lambda: PROJECT_SCHEMA)
    temperature: Optional[float] = None


def build_user_prompt(idea: str) -> str:
    return f'Build a mandatory Full-Stack Python Flask project for: "{idea}"'


def build_request(idea: str, model: str, temperature: Optional[float] = None) -> GenerationRequest:
    if not idea or not idea.strip():
        raise ValueError("idea must not be empty")
    return GenerationRequest(
        model=model,
        prompt=build_user_prompt(idea),
        temperature=temperature,
    )
