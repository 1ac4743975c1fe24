"""cumulus - handler-chain runtime and service clients for AWS-style APIs.

The runtime lives in `cumulus.runtime`; service clients live under
`cumulus.services`:

    from cumulus.services.dynamodb import DynamoDBClient

    with DynamoDBClient(region="ca-central-1") as dynamodb:
        response = dynamodb.get_item(table_name="users", key={"id": {"S": "123"}})
        print(response.item)
"""

__version__ = "0.1.0"
