"""Error handling patterns with recovery hints.

This example demonstrates how to handle common errors and use
the recovery_hint property to provide actionable guidance.
"""

from pathlib import Path

from storagekit import (
    BlobInfo,
    BucketInfo,
    # Exceptions
    InvalidOriginError,
    MissingFieldError,
    Origin,
    StoragekitError,
    UnknownHttpMethodError,
    WireFormatError,
    load_resource,
)


# Pattern 1: Required fields are checked as soon as they are set
def build_blob(bucket: str | None, name: str) -> BlobInfo | None:
    """Build a BlobInfo, returning None when the bucket is missing."""
    try:
        return BlobInfo.of(bucket, name)  # type: ignore[arg-type]
    except MissingFieldError as e:
        print(f"Cannot build blob: {e}")
        print(f"Hint: {e.recovery_hint}")
        return None


# Pattern 2: Validate user-supplied origins
def parse_origin(scheme: str, host: str, port: int = -1) -> Origin | None:
    """Build an origin, reporting the underlying URI error."""
    try:
        return Origin.from_parts(scheme, host, port)
    except InvalidOriginError as e:
        print(f"Invalid origin: {e}")
        print(f"Caused by: {e.cause!r}")
        return None


# Pattern 3: Decoding resources from the service or from files
def load_bucket(path: Path) -> BucketInfo:
    """Load a bucket resource, distinguishing the failure causes."""
    try:
        return BucketInfo.from_wire(load_resource(path))  # type: ignore[arg-type]
    except UnknownHttpMethodError as e:
        # recovery_hint lists the accepted method names
        print(f"Bad CORS rule: {e}")
        print(f"Hint: {e.recovery_hint}")
        raise
    except WireFormatError as e:
        print(f"Malformed field '{e.field}': {e.value!r}")
        raise


# Pattern 4: Catch-all for any library error
def describe(path: Path) -> None:
    try:
        bucket = load_bucket(path)
    except StoragekitError as e:
        print(f"Error: {e}")
        if e.recovery_hint:
            print(f"Hint: {e.recovery_hint}")
        return
    print(f"Bucket {bucket.name} has {len(bucket.cors or ())} CORS rules")


if __name__ == "__main__":
    build_blob(None, "data.csv")
    parse_origin("1http", "example.com")
    describe(Path("bucket.json"))
