"""Service-independent client runtime.

Components:
- client: ServiceClient base class (ServiceClient)
- pipeline: Handler chain (RuntimePipeline, PipelineHandler)
- handlers: Default pipeline stages
- protocols: Wire protocols (JSON, Query, EC2, REST-XML)
- auth: Request signers (AWS4Signer, QueryStringSigner)
- credentials: Credential sources (FallbackCredentialsFactory)
- retry: Retry policies (DefaultRetryPolicy)
- regions: Region registry (RegionEndpoint)
- paginator: Token pagination (Paginator)
- executor: OperationResult wrapper (execute_api_call)
"""
