"""Image Store Service Package."""

__version__ = "1.0.0"
__description__ = (
    "Serverless image store keeping data-URI images in DynamoDB behind AWS Lambda"
)

__all__ = ["handlers", "core"]
