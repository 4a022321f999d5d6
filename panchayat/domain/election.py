import logging
from functools import cmp_to_key

from pydantic import ValidationError

from panchayat.config import ALREADY_VOTED, MIN_VOTER_AGE, UNAUTHORIZED_VOTER, WRONG_CANDIDATE
from panchayat.domain.models import Ballot, Candidate, CandidateResult, Voter

logger = logging.getLogger(__name__)


def _by_votes_descending(first: CandidateResult, second: CandidateResult) -> int:
    return second.votes - first.votes


class ElectionRegistry:
    """Voter registration, ballots and tallies for a single election.

    Registered voters and ballots are private to the instance; the only way
    to change them is through ``register_voter`` and ``cast_vote``.
    """

    def __init__(self, candidates):
        self._candidates = tuple(
            c if isinstance(c, Candidate) else Candidate.model_validate(c) for c in candidates
        )
        self._candidate_ids = {c.id for c in self._candidates}
        self._registered_voters: dict[str, Voter] = {}
        self._ballots: dict[str, Ballot] = {}

    @property
    def candidates(self) -> tuple[Candidate, ...]:
        return self._candidates

    @property
    def voter_count(self) -> int:
        return len(self._registered_voters)

    @property
    def ballot_count(self) -> int:
        return len(self._ballots)

    def is_registered(self, voter_id: str) -> bool:
        return voter_id in self._registered_voters

    def has_voted(self, voter_id: str) -> bool:
        return voter_id in self._ballots

    def register_voter(self, voter) -> bool:
        if voter is None:
            return False
        if not isinstance(voter, Voter):
            try:
                voter = Voter.model_validate(voter)
            except ValidationError:
                logger.info("Rejected malformed voter record: %r", voter)
                return False

        if not voter.id or voter.id in self._registered_voters or voter.age < MIN_VOTER_AGE:
            logger.info("Rejected voter registration for %r", voter.id)
            return False

        self._registered_voters[voter.id] = voter
        logger.debug("Registered voter %s", voter.id)
        return True

    def cast_vote(self, voter_id, candidate_id, on_success, on_error):
        """Record a ballot and report the outcome through one of the callbacks.

        Checks run in order: candidate exists, voter is registered, voter has
        not voted yet. The return value is whatever the invoked callback
        returns.
        """
        if candidate_id not in self._candidate_ids:
            return on_error(WRONG_CANDIDATE)

        if voter_id not in self._registered_voters:
            return on_error(UNAUTHORIZED_VOTER)

        if voter_id in self._ballots:
            return on_error(ALREADY_VOTED)

        ballot = Ballot(voter_id=voter_id, candidate_id=candidate_id)
        self._ballots[voter_id] = ballot
        logger.debug("Ballot recorded for voter %s", voter_id)
        return on_success(ballot)

    def get_results(self, comparator=None) -> list[CandidateResult]:
        counts = {candidate_id: 0 for candidate_id in self._candidate_ids}
        for ballot in self._ballots.values():
            counts[ballot.candidate_id] += 1

        results = [
            CandidateResult(**candidate.model_dump(), votes=counts[candidate.id])
            for candidate in self._candidates
        ]
        # sorted() is stable, so ties keep the candidate order
        return sorted(results, key=cmp_to_key(comparator or _by_votes_descending))

    def get_winner(self):
        results = self.get_results()
        if not results or results[0].votes == 0:
            return None
        return results[0]


def create_election(candidates) -> ElectionRegistry:
    return ElectionRegistry(candidates)
