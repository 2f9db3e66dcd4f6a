#!/usr/bin/env python3
"""Library usage examples for credgen."""

import json

from credgen import (
    CredentialPair,
    EncodingFormat,
    GenerationOptions,
    ValidationError,
    generate_oauth_credentials,
)


def dump(credentials: CredentialPair) -> str:
    return json.dumps(credentials.model_dump(by_alias=True), indent=2)


def generate_safe_credentials(**options) -> CredentialPair | None:
    """Return None instead of raising on invalid options."""
    try:
        return generate_oauth_credentials(**options)
    except ValidationError as e:
        print(f"Failed to generate credentials: {e}")
        return None


def main() -> None:
    print("Basic usage")
    print(dump(generate_oauth_credentials()))
    print()

    print("Custom prefix")
    print(dump(generate_oauth_credentials(id_prefix="prod")))
    print()

    print("Longer credentials")
    options = GenerationOptions(id_prefix="secure", id_length=32, secret_length=64)
    print(dump(generate_oauth_credentials(options)))
    print()

    print("Encodings")
    for encoding in EncodingFormat:
        credentials = generate_oauth_credentials(id_prefix=encoding.value, encoding=encoding)
        print(f"{encoding}: {dump(credentials)}")
    print()

    print("One pair per environment")
    environments = {
        env: generate_oauth_credentials(id_prefix=env).model_dump(by_alias=True)
        for env in ("dev", "staging", "prod")
    }
    print(json.dumps(environments, indent=2))
    print()

    print("Error handling")
    print("Invalid:", generate_safe_credentials(id_length=-1))
    valid = generate_safe_credentials(id_prefix="valid")
    print("Valid:", valid.client_id if valid else None)


if __name__ == "__main__":
    main()
