import pytest

from panchayat.domain.models import Region, Voter, VoterRules
from panchayat.domain.rules import count_votes_in_regions, create_vote_validator, tally_pure


@pytest.fixture
def validator():
    return create_vote_validator({"minAge": 18, "requiredFields": ["id", "name", "age"]})


def test_validator_accepts_complete_voter(validator):
    result = validator({"id": "V1", "name": "Mohan", "age": 25})

    assert result.valid is True
    assert result.reason is None


def test_validator_rejects_under_age(validator):
    result = validator({"id": "V1", "name": "Chotu", "age": 12})

    assert result.valid is False
    assert result.reason == "Voter is below the minimum age"


def test_validator_checks_age_before_fields(validator):
    result = validator({"age": 10})

    assert result.reason == "Voter is below the minimum age"


@pytest.mark.parametrize("voter", [
    {"name": "Mohan", "age": 25},
    {"id": "V1", "age": 25},
    {"id": "V1", "name": "Mohan"},
])
def test_validator_rejects_missing_fields(validator, voter):
    result = validator(voter)

    assert result.valid is False
    assert result.reason == "Voter should have required fields"


def test_validator_accepts_models():
    validate = create_vote_validator(VoterRules(min_age=21))

    assert validate(Voter(id="V1", name="Mohan", age=21)).valid is True
    assert validate(Voter(id="V2", name="Geeta", age=20)).valid is False


def test_validator_default_rules():
    validate = create_vote_validator()

    assert validate({"id": "V1", "name": "Mohan", "age": 18}).valid is True
    assert validate({"id": "V1", "name": "Mohan", "age": 17}).valid is False


def test_validator_custom_required_fields():
    validate = create_vote_validator({"min_age": 18, "required_fields": ["id", "ward"]})

    assert validate({"id": "V1", "ward": 4}).valid is True
    assert validate({"id": "V1", "name": "Mohan", "age": 30}).valid is False


def test_count_votes_nested_regions():
    region_tree = {
        "name": "District",
        "votes": 100,
        "subRegions": [
            {"name": "Block A", "votes": 40, "subRegions": [
                {"name": "Village 1", "votes": 10, "subRegions": []},
                {"name": "Village 2", "votes": 5},
            ]},
            {"name": "Block B", "votes": 20, "subRegions": []},
        ],
    }

    assert count_votes_in_regions(region_tree) == 175


def test_count_votes_single_region():
    assert count_votes_in_regions(Region(name="Village", votes=42)) == 42


def test_count_votes_model_tree():
    tree = Region(name="Block", votes=3, sub_regions=[Region(name="Village", votes=7)])

    assert count_votes_in_regions(tree) == 10


@pytest.mark.parametrize("region_tree", [None, "district", 12, {"votes": "many"}])
def test_count_votes_invalid_tree(region_tree):
    assert count_votes_in_regions(region_tree) == 0


def test_tally_pure_increments_existing():
    tally = {"C1": 5, "C2": 3}

    new_tally = tally_pure(tally, "C1")

    assert new_tally == {"C1": 6, "C2": 3}
    assert tally == {"C1": 5, "C2": 3}
    assert new_tally is not tally


def test_tally_pure_adds_new_candidate():
    tally = {"C1": 5}

    assert tally_pure(tally, "C3") == {"C1": 5, "C3": 1}
    assert tally == {"C1": 5}


def test_tally_pure_empty():
    assert tally_pure({}, "C1") == {"C1": 1}


@pytest.mark.parametrize("voter", [None, "V1", 42, ["id", "name", "age"]])
def test_validator_rejects_non_records(validator, voter):
    result = validator(voter)

    assert result.valid is False
    assert result.reason == "Voter should have required fields"


def test_count_votes_skips_unreadable_sub_regions():
    region_tree = {
        "name": "Block",
        "votes": 5,
        "subRegions": [None, {"name": "Village", "votes": "many"}, {"name": "Village 2", "votes": 3}],
    }

    assert count_votes_in_regions(region_tree) == 8


def test_count_votes_fractional_votes():
    assert count_votes_in_regions({"votes": 2.5, "subRegions": [{"votes": 1}]}) == 3.5


def test_count_votes_ignores_non_list_sub_regions():
    assert count_votes_in_regions({"votes": 4, "sub_regions": "none"}) == 4
