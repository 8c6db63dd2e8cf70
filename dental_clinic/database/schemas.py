"""
Data models

- Pydantic provides automatic validation at the API boundary
- Stored and served with camelCase keys (dateOfBirth, avatarUrl, ...)
- Python attributes stay snake_case via an alias generator
"""
import re
from typing import Optional, Literal
from pydantic import BaseModel, Field, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

FileType = Literal["image", "doc", "other"]
Provider = Literal["local", "remote"]

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PatientInput(CamelModel):
    """
    Add-patient payload (intake form)

    Every field is required; enter "None" for an empty history.
    """
    name: str            = Field(..., description="Patient full name")
    phone: str           = Field(..., description="Phone number")
    email: str           = Field(..., description="Email address")
    date_of_birth: str   = Field(..., description="Date of birth (format: YYYY-MM-DD)")
    medical_history: str = Field(..., description="Medical history, or 'None' if not applicable")
    dental_history: str  = Field(..., description="Dental history, or 'None' if not applicable")

    @field_validator("name", "phone", "date_of_birth", "medical_history", "dental_history")
    @classmethod
    def validate_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("field is required")
        return value

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str) -> str:
        if not EMAIL_PATTERN.match(value):
            raise ValueError("please enter a valid email")
        return value


class Patient(CamelModel):
    """
    Patient record as persisted in patients.json
    """
    id: int              = Field(...,  description="Patient identifier (assigned by the repository)")
    name: str            = Field(...,  description="Patient full name")
    phone: str           = Field(...,  description="Phone number")
    email: str           = Field(...,  description="Email address")
    date_of_birth: str   = Field(...,  description="Date of birth (format: YYYY-MM-DD)")
    medical_history: str = Field(...,  description="Medical history")
    dental_history: str  = Field(...,  description="Dental history")
    avatar_url: str      = Field(...,  description="Avatar image URL (placeholder)")


class DigitalFileInput(CamelModel):
    """
    Uploaded file metadata, before a provider is chosen
    """
    name: str              = Field(..., description="Display file name")
    url: str               = Field(..., description="Data URI or remote URL")
    type: FileType         = Field(..., description="File category: image, doc or other")
    hint: Optional[str]    = Field(None, description="Short content hint (e.g., 'dental x-ray')")


class DigitalFile(DigitalFileInput):
    """
    Stored file entry, tagged with the provider that holds it
    """
    provider: Provider     = Field(..., description="Backend that stores the file: local or remote")


class ShareResult(BaseModel):
    """
    Outcome of sharing a file with a specialist
    """
    success: bool          = Field(...,  description="Whether a shareable URL was produced")
    url: Optional[str]     = Field(None, description="Shareable URL (data URI for local files)")
    error: Optional[str]   = Field(None, description="Reason sharing is not available")


class DiagnosisInput(CamelModel):
    """
    Input to the AI diagnosis assistant
    """
    patient_history: str   = Field(..., description="Complete medical and dental history of the patient")
    chart_markings: str    = Field("", description="Conditions or treatments marked on the dental chart")


class DiagnosisOutput(CamelModel):
    """
    Suggestions returned by the AI diagnosis assistant
    """
    potential_diagnoses: str  = Field(..., description="Potential diagnoses based on the provided information")
    suggested_treatments: str = Field(..., description="Suggested treatment options")
    confidence_level: str     = Field(..., description="Confidence in the suggestions: high, medium or low")
