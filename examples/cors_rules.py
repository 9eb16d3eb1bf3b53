"""Configuring CORS rules on a bucket.

This example builds CORS rules from HTTP methods and origins, attaches
them to a bucket, and prints the resulting buckets resource.
"""

import json

from storagekit import BucketInfo, Cors, HttpMethod, Origin


# Allow any site to read objects
public_read = (
    Cors.builder()
    .methods([HttpMethod.GET, HttpMethod.HEAD])
    .origins([Origin.any()])
    .max_age_seconds(3600)
    .build()
)

# Allow uploads only from the application's own origin
uploads = (
    Cors.builder()
    .methods([HttpMethod.PUT, HttpMethod.POST])
    .origins([Origin.from_parts("https", "app.example.com", 8443)])
    .response_headers(["Content-Type", "x-goog-resumable"])
    .build()
)

bucket = BucketInfo.builder("my-bucket").cors([public_read, uploads]).build()
print(json.dumps(bucket.to_wire(), indent=2))

# Method names are matched case-insensitively when decoding
decoded = Cors.from_wire({"method": ["get"], "origin": ["*"]})
assert decoded.methods == (HttpMethod.GET,)
assert decoded.origins == (Origin.any(),)
