from collections.abc import Mapping

from pydantic import BaseModel, ValidationError

from panchayat.domain.models import Region, ValidationResult, VoterRules

UNDER_AGE = "Voter is below the minimum age"
MISSING_FIELDS = "Voter should have required fields"

_SUB_REGION_KEYS = ("sub_regions", "subRegions")


def _fields_of(voter):
    if isinstance(voter, BaseModel):
        return voter.model_dump()
    if isinstance(voter, Mapping):
        return dict(voter)
    return None


def create_vote_validator(rules=None):
    """Build a validator for voter records.

    The returned function takes a voter (mapping or model) and answers with a
    ``ValidationResult``. Age is checked before required fields. Anything
    else counts as a record without the required fields.
    """
    if rules is None:
        rules = VoterRules()
    elif not isinstance(rules, VoterRules):
        rules = VoterRules.model_validate(rules)

    def validate(voter) -> ValidationResult:
        fields = _fields_of(voter)
        if fields is None:
            return ValidationResult(valid=False, reason=MISSING_FIELDS)

        age = fields.get("age")
        if isinstance(age, (int, float)) and not isinstance(age, bool) and age < rules.min_age:
            return ValidationResult(valid=False, reason=UNDER_AGE)

        if not all(field in fields for field in rules.required_fields):
            return ValidationResult(valid=False, reason=MISSING_FIELDS)

        return ValidationResult(valid=True)

    return validate


def count_votes_in_regions(region_tree):
    """Sum the votes of a region and all of its sub-regions.

    Nodes that cannot be read as a region count as 0 along with everything
    below them; their siblings are still counted.
    """
    if isinstance(region_tree, Region):
        return region_tree.votes + sum(count_votes_in_regions(sub) for sub in region_tree.sub_regions)
    if not isinstance(region_tree, Mapping):
        return 0

    node = {key: value for key, value in region_tree.items() if key not in _SUB_REGION_KEYS}
    try:
        region = Region.model_validate(node)
    except ValidationError:
        return 0

    sub_regions = next((region_tree[key] for key in _SUB_REGION_KEYS if key in region_tree), None)
    if not isinstance(sub_regions, (list, tuple)):
        sub_regions = []

    return region.votes + sum(count_votes_in_regions(sub) for sub in sub_regions)


def tally_pure(current_tally, candidate_id) -> dict:
    # never mutate the caller's tally
    return {**current_tally, candidate_id: current_tally.get(candidate_id, 0) + 1}
