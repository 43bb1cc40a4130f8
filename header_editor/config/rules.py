HEADER_RULES = [
    {
        # x-forwarded-for -> x-original-x-forwarded-for
        "key": "x-forwarded-for",
        "prefix": "x-original-",
    },
    {
        "key": "x-api-key",
        "rename": "x-client-key",
        "values": {
            "apply": "only",
            "prefix": "key=",
        },
    },
    {
        "key": "x-version",
        "values": {
            "apply": "last",
            "suffix": ";gateway",
        },
    },
]
