"""Common constants shared across scpgen modules."""

POLICY_VERSION = "2012-10-17"
WILDCARD_RESOURCE = "*"
ACTION_SEPARATOR = ":"
