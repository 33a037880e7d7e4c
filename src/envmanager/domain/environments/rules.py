from __future__ import annotations

# Comparison row categories, in display order
MATCHING = "MATCHING"
DIFFERENT = "DIFFERENT"
ONLY_FIRST = "ONLY_FIRST"
PARTIAL = "PARTIAL"
ONLY_SECOND = "ONLY_SECOND"

CATEGORY_RANK = {
    MATCHING: 0,
    DIFFERENT: 1,
    ONLY_FIRST: 2,
    PARTIAL: 2,
    ONLY_SECOND: 3,
}

# Compared fields
FIELD_VERSION = "version"
FIELD_NAME = "name"
FIELD_PUBLISHER = "publisher"
FIELD_PUBLISHED_AS = "published_as"

COMPARED_FIELDS = (FIELD_VERSION, FIELD_NAME, FIELD_PUBLISHER, FIELD_PUBLISHED_AS)
