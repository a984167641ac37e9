from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field


class _WireModel(BaseModel):
    # Attributes are snake_case; the model speaks camelCase on the wire.
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class ProjectFile(_WireModel):
    file_name: str = Field(alias="fileName")  # e.g. "backend/app.py"
    code: str
    language: str


class VivaQuestion(_WireModel):
    question: str
    answer: str


class GeneratedProject(_WireModel):
    """
    Structured result of one generation call.

    Created wholesale from the model's JSON payload and never mutated. The
    file list keeps the order the model declared it in.
    """

    project_title: str = Field(alias="projectTitle")
    domain: str
    tech_stack: str = Field(alias="techStack")
    folder_structure: str = Field(alias="folderStructure")
    files: List[ProjectFile] = Field(min_length=1)
    api_flow_explanation: str = Field(alias="apiFlowExplanation")
    how_to_run: List[str] = Field(alias="howToRun")
    concept_explanation: str = Field(alias="conceptExplanation")
    viva_questions: List[VivaQuestion] = Field(alias="vivaQuestions")
    future_enhancements: List[str] = Field(alias="futureEnhancements")

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)

    def file_names(self) -> List[str]:
        return [f.file_name for f in self.files]


def wire_field_names() -> List[str]:
    """camelCase names of every GeneratedProject field, in declaration order."""
    return [field.alias or name for name, field in GeneratedProject.model_fields.items()]
