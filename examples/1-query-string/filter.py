import logging

from aqlfilter import FilterError, FilterProcessor, to_statement

logging.basicConfig(level=logging.DEBUG)

# Processor settings can also live in a YAML file:
# fp = FilterProcessor.from_yaml("processor.yaml")
fp = FilterProcessor(var_name="u")

raw = """
{
    "offset": 20,
    "limit": 10,
    "sort": ["lastName", "age desc"],
    "where": [
        {"active": true},
        {"or": [{"age": {"gte": 18}}, {"like": {"text": "email", "search": "%@example.com"}}]}
    ]
}
"""

try:
    processed = fp.process_json(raw)
except FilterError as e:
    # invalid input: reject with a bad-request response, never retry
    raise SystemExit(f"bad filter: {e}")

query = f"FOR u IN users\n{to_statement(processed)}\nRETURN u"
print(query)
