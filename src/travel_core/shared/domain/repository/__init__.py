from .document_store import DocumentStore as DocumentStore
from .repository import Repository as Repository
