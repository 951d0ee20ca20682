"""
Persons bounded context — domain layer.

- Person entity and the three-state creation payload
- Creation validation rules
- PersonRepository port
- Error taxonomy
"""
