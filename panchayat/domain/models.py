from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt

from panchayat.config import MIN_VOTER_AGE, VOTER_REQUIRED_FIELDS


class Candidate(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    party: str


class Voter(BaseModel):
    id: str
    name: str
    age: Union[StrictInt, StrictFloat]


class Ballot(BaseModel):
    model_config = ConfigDict(frozen=True)

    voter_id: str
    candidate_id: str


class CandidateResult(Candidate):
    votes: int = 0


class ValidationResult(BaseModel):
    valid: bool
    reason: Optional[str] = None


class Region(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = ""
    votes: Union[StrictInt, StrictFloat] = 0
    sub_regions: List["Region"] = Field(default_factory=list, alias="subRegions")


class VoterRules(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    min_age: int = Field(default=MIN_VOTER_AGE, alias="minAge")
    required_fields: List[str] = Field(
        default_factory=lambda: list(VOTER_REQUIRED_FIELDS), alias="requiredFields"
    )
