"""Amazon EC2 client, models and exceptions."""

from cumulus.services.ec2.client import EC2Client
from cumulus.services.ec2.errors import EC2Error

__all__ = ["EC2Client", "EC2Error"]
