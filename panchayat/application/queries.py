from pydantic import BaseModel


class GetElectionResultsQuery(BaseModel):
    election_id: int

class GetWinnerQuery(BaseModel):
    election_id: int

class CheckVoterExistsQuery(BaseModel):
    election_id: int
    voter_id: str

class HasVotedQuery(BaseModel):
    election_id: int
    voter_id: str

class GetAllElectionsQuery(BaseModel):
    pass  # No parameters are required for listing elections
