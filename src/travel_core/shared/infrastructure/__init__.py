from .dynamodb_document_store import DynamoDBDocumentStore as DynamoDBDocumentStore
