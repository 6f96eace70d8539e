# example.py
import datetime as _dt

import shape_schema as ss
from shape_schema.utils import _display

sc = ss.object({
    "name": ss.string().nullable().default(""),
    "age": ss.number().default(0),
    "nested": ss.object({
        "name": ss.date().nullable(),
        "age": ss.boolean(),
    }),
    "arr": ss.array(ss.string()),
})

# 1) per-field use of the tree
_display(sc.properties["name"].parse("John"))

# 2) parse trusts the caller; validate only checks the outer shape
payload = {
    "name": "John",
    "age": 1,
    "nested": {
        "name": _dt.datetime.now(),
        "age": True,
    },
    "arr": ["John", "Doe"],
}
result = sc.parse(payload)
_display(sc.validate(result))

# 3) nested fields are checked by hand
for field, child in sc.properties.items():
    _display(f"{field}: {child.validate(payload[field])}")

# 4) a readable summary of the tree
_display(ss.to_markdown_card(sc, title="Person"))
