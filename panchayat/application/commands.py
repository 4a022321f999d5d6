from typing import List

from pydantic import BaseModel

from panchayat.domain.models import Candidate, Voter


class CreateElectionCommand(BaseModel):
    name: str
    candidates: List[Candidate]


class RegisterVoterCommand(BaseModel):
    election_id: int
    voter: Voter


class CastVoteCommand(BaseModel):
    election_id: int
    voter_id: str
    candidate_id: str
