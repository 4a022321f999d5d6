import logging

from panchayat.application.commands import CastVoteCommand, CreateElectionCommand, RegisterVoterCommand
from panchayat.application.queries import (
    CheckVoterExistsQuery,
    GetAllElectionsQuery,
    GetElectionResultsQuery,
    GetWinnerQuery,
    HasVotedQuery,
)
from panchayat.application.query_bus import query_bus
from panchayat.infrastructure.election_repo import ElectionRepository, election_repo

logger = logging.getLogger(__name__)


def _get_registry(repo: ElectionRepository, election_id: int):
    registry = repo.get_election_by_id(election_id)
    if registry is None:
        raise ValueError("Election not found")
    return registry


class CreateElectionHandler:
    def __init__(self, repo: ElectionRepository = election_repo):
        self.repo = repo

    def handle(self, command: CreateElectionCommand):
        election_id, registry = self.repo.create_election(command.name, command.candidates)
        logger.info("Created election %s (%s) with %d candidates",
                    election_id, command.name, len(registry.candidates))

        return {
            "election_id": election_id,
            "name": command.name,
            "candidates": [candidate.model_dump() for candidate in registry.candidates],
        }


class RegisterVoterHandler:
    def __init__(self, repo: ElectionRepository = election_repo):
        self.repo = repo

    def handle(self, command: RegisterVoterCommand):
        registry = _get_registry(self.repo, command.election_id)

        if not registry.register_voter(command.voter):
            raise ValueError("Voter could not be registered")

        logger.info("Voter registered: %s in election %s", command.voter.id, command.election_id)
        return command.voter


class CastVoteHandler:
    def __init__(self, repo: ElectionRepository = election_repo):
        self.repo = repo

    def handle(self, command: CastVoteCommand):
        registry = _get_registry(self.repo, command.election_id)

        def on_success(ballot):
            logger.info("Vote recorded for voter %s in election %s",
                        ballot.voter_id, command.election_id)
            return ballot.model_dump()

        def on_error(reason):
            raise ValueError(reason)

        return registry.cast_vote(command.voter_id, command.candidate_id, on_success, on_error)


class GetElectionResultsHandler:
    def __init__(self, repo: ElectionRepository = election_repo):
        self.repo = repo

    def handle(self, query: GetElectionResultsQuery):
        registry = _get_registry(self.repo, query.election_id)
        results = registry.get_results()

        return {
            "election_id": query.election_id,
            "name": self.repo.get_election_name(query.election_id),
            "results": [result.model_dump() for result in results],
            "total_votes": registry.ballot_count,
        }


class GetWinnerHandler:
    def __init__(self, repo: ElectionRepository = election_repo):
        self.repo = repo

    def handle(self, query: GetWinnerQuery):
        return _get_registry(self.repo, query.election_id).get_winner()


class CheckVoterExistsHandler:
    def __init__(self, repo: ElectionRepository = election_repo):
        self.repo = repo

    def handle(self, query: CheckVoterExistsQuery):
        return _get_registry(self.repo, query.election_id).is_registered(query.voter_id)


class HasVotedHandler:
    def __init__(self, repo: ElectionRepository = election_repo):
        self.repo = repo

    def handle(self, query: HasVotedQuery):
        return _get_registry(self.repo, query.election_id).has_voted(query.voter_id)


class GetAllElectionsHandler:
    def __init__(self, repo: ElectionRepository = election_repo):
        self.repo = repo

    def handle(self, query: GetAllElectionsQuery):
        return [
            {
                "election_id": election_id,
                "name": name,
                "candidates": [candidate.id for candidate in registry.candidates],
                "voters": registry.voter_count,
                "votes_cast": registry.ballot_count,
            }
            for election_id, name, registry in self.repo.get_all_elections()
        ]


class CommandBus:
    """Routes election commands (create, register, vote) to their handlers."""

    def __init__(self):
        self.handlers = {}

    def register_handler(self, command_type, handler):
        self.handlers[command_type] = handler

    def handle(self, command):
        handler = self.handlers.get(type(command))
        if handler is None:
            raise ValueError(f"No handler registered for command type: {type(command).__name__}")
        return handler.handle(command)


# Wire handlers to the shared repository
command_bus = CommandBus()
command_bus.register_handler(CreateElectionCommand, CreateElectionHandler())
command_bus.register_handler(RegisterVoterCommand, RegisterVoterHandler())
command_bus.register_handler(CastVoteCommand, CastVoteHandler())

# Register query handlers
query_bus.register_handler(GetElectionResultsQuery, GetElectionResultsHandler())
query_bus.register_handler(GetWinnerQuery, GetWinnerHandler())
query_bus.register_handler(CheckVoterExistsQuery, CheckVoterExistsHandler())
query_bus.register_handler(HasVotedQuery, HasVotedHandler())
query_bus.register_handler(GetAllElectionsQuery, GetAllElectionsHandler())
