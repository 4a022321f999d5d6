import logging
import os

MIN_VOTER_AGE = int(os.getenv("PANCHAYAT_MIN_VOTER_AGE", "18"))
VOTER_REQUIRED_FIELDS = ("id", "name", "age")

LOG_LEVEL = os.getenv("PANCHAYAT_LOG_LEVEL", "WARNING")

# Reasons handed to the error callback of cast_vote
WRONG_CANDIDATE = "Wrong candidate!"
UNAUTHORIZED_VOTER = "Unauthorized voter!"
ALREADY_VOTED = "Already voted!"


def configure_logging(level=None):
    logging.getLogger("panchayat").setLevel(level or LOG_LEVEL)
