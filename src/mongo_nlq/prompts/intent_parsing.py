"""Intent parsing prompt templates."""

from __future__ import annotations

from collections.abc import Sequence

# The worked examples are required: without them the model rarely produces
# valid aggregation syntax.
INTENT_PARSING_TEMPLATE = """\
You are an assistant that analyzes questions about a MongoDB database \
(usually asked in French) and turns them into MongoDB queries.
Available collections: {collections}.
Respond ONLY with a single JSON object, no explanation, shaped like:
{{
  "intent": "list|search|aggregate",
  "collection": "collection_name",
  "query": {{}}
}}
For "list" and "search", "query" is a find filter object ({{}} matches everything).
For "aggregate", "query" is an array of pipeline stages.

For a maximum (highest, top, most), use:
{{
  "intent": "aggregate",
  "collection": "collection_name",
  "query": [
    {{ "$sort": {{ "qtestock": -1 }} }},
    {{ "$limit": 1 }}
  ]
}}

For information linked to a sub-category through the scategorieID field, use:
{{
  "intent": "aggregate",
  "collection": "articles",
  "query": [
    {{
      "$lookup": {{
        "from": "scategories",
        "localField": "scategorieID",
        "foreignField": "_id",
        "as": "scategorie"
      }}
    }},
    {{ "$unwind": "$scategorie" }},
    {{
      "$project": {{
        "_id": 0,
        "designation": 1,
        "prix": 1,
        "qtestock": 1,
        "imageart": 1,
        "nomscategorie": "$scategorie.nomscategorie"
      }}
    }}
  ]
}}

Question: {question}
"""


def build_intent_prompt(question: str, collections: Sequence[str]) -> str:
    """Compose the intent prompt for ``question`` over ``collections``."""
    return INTENT_PARSING_TEMPLATE.format(
        collections=", ".join(collections),
        question=question,
    )
