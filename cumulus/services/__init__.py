"""Service clients.

Each service package exposes its client, request/response models and
exceptions:
- dynamodb: DynamoDBClient (JSON 1.0)
- cloudformation: CloudFormationClient (query)
- elasticbeanstalk: ElasticBeanstalkClient (query)
- s3: S3Client (REST-XML)
- sns: SNSClient (query)
- simpledb: SimpleDBClient (query, signature version 2)
- ec2: EC2Client (EC2 query)
"""
