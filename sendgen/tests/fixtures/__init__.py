"""Test fixtures for sendgen tests.

Sample request/response models, as Python objects and as model
description documents, for testing code generation.
"""

from sendgen.models import Field, Function

HEADER = '// Code generated by sendgen. DO NOT EDIT.\npackage wrapper'

# Request with one path parameter and one body field
GET_THING = Field(
    name='r',
    definition='*X',
    fields=[
        Field(name='ID', definition='string'),
        Field(name='Payload', definition='[]byte', tags=['json']),
    ],
)


def make_function(*responses: str, request: Field = GET_THING) -> Function:
    """Build a Function mapping ``request`` to the given response types."""
    return Function(
        name=request.definition.lstrip('*'),
        from_=request,
        to=[Field(definition=definition) for definition in responses or ('Y',)],
    )


# Request whose endpoint mixes the application ID with request fields
EDIT_GUILD_COMMAND = Field(
    name='r',
    definition='*EditGuildApplicationCommand',
    package='disgo',
    fields=[
        Field(name='GuildID', definition='Snowflake'),
        Field(name='ApplicationID', definition='Snowflake'),
        Field(name='Name', definition='string', tags=['json']),
        Field(name='CommandID', definition='Snowflake'),
        Field(name='Description', definition='string', tags=['json']),
    ],
)

# Request without any endpoint parameter
GET_GATEWAY = Field(name='r', definition='*GetGateway', package='disgo')

MODEL_DOCUMENT = {
    'header': HEADER,
    'functions': [
        {
            'name': 'GetGuild',
            'from': {
                'name': 'r',
                'definition': '*GetGuild',
                'package': 'disgo',
                'fields': [
                    {'name': 'GuildID', 'definition': 'Snowflake'},
                    {'name': 'WithCounts', 'definition': 'bool', 'tags': ['url']},
                ],
            },
            'to': [
                {'definition': '*Guild', 'package': 'disgo'},
                {'definition': 'error'},
            ],
        },
        {
            'name': 'DeleteGuild',
            'from': {
                'name': 'r',
                'definition': '*DeleteGuild',
                'package': 'disgo',
                'fields': [{'name': 'GuildID', 'definition': 'Snowflake'}],
            },
            'to': [{'definition': 'error'}],
        },
    ],
}

MODEL_YAML = """\
header: |-
  // Code generated by sendgen. DO NOT EDIT.
  package wrapper
functions:
  - name: GetGuild
    from:
      name: r
      definition: "*GetGuild"
      package: disgo
      fields:
        - {name: GuildID, definition: Snowflake}
        - {name: WithCounts, definition: bool, tags: [url]}
    to:
      - {definition: "*Guild", package: disgo}
      - {definition: error}
  - name: DeleteGuild
    from:
      name: r
      definition: "*DeleteGuild"
      package: disgo
      fields:
        - {name: GuildID, definition: Snowflake}
    to:
      - {definition: error}
"""
