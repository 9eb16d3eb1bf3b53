"""Building, updating and encoding object metadata.

This example shows the builder workflow: build a BlobInfo, derive an
updated copy with to_builder(), and clear a field so the service removes
it on the next patch request.
"""

from storagekit import Acl, BlobInfo, Role, User


# Build metadata for a new object
blob = (
    BlobInfo.builder("my-bucket", "reports/q1.csv")
    .content_type("text/csv")
    .cache_control("max-age=3600")
    .metadata({"team": "finance"})
    .acl([Acl(User.all_users(), Role.READER)])
    .build()
)
print(blob.to_wire())

# Values are immutable; derive a changed copy through a builder
updated = blob.to_builder().content_type("application/csv").build()
assert blob.content_type == "text/csv"
assert updated.content_type == "application/csv"

# Passing None clears a field: the resource carries an explicit null
cleared = blob.to_builder().cache_control(None).build()
assert cleared.cache_control is None
print(cleared.to_wire()["cacheControl"])  # None

# Decoding a resource from the JSON API gives back an equal value
assert BlobInfo.from_wire(updated.to_wire()) == updated
