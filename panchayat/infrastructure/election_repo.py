from panchayat.domain.election import ElectionRegistry


class ElectionRepository:
    """In-memory store of election registries keyed by sequential ids."""

    def __init__(self):
        self._elections = {}
        self._next_id = 1

    def create_election(self, name: str, candidates):
        registry = ElectionRegistry(candidates)
        election_id = self._next_id
        self._elections[election_id] = (name, registry)
        self._next_id += 1
        return election_id, registry

    def get_election_by_id(self, election_id: int):
        entry = self._elections.get(election_id)
        return entry[1] if entry else None

    def get_election_name(self, election_id: int):
        entry = self._elections.get(election_id)
        return entry[0] if entry else None

    def get_all_elections(self):
        return [
            (election_id, name, registry)
            for election_id, (name, registry) in self._elections.items()
        ]

    def clear(self):
        self._elections.clear()
        self._next_id = 1


election_repo = ElectionRepository()
