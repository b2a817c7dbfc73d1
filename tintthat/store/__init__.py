from tintthat.store.codec import (
    CollectionDocument,
    collection_to_document,
    decode_collection,
    document_to_collection,
    encode_collection,
)
from tintthat.store.location import StoreLocation, get_location, init_store
from tintthat.store.operations import (
    clear_open_collection_id,
    collection_file_exists,
    delete_collection_file,
    get_decoded_collection,
    list_collections,
    read_open_collection_id,
    save_collection,
    write_open_collection_id,
)

__all__ = [
    "CollectionDocument",
    "StoreLocation",
    "clear_open_collection_id",
    "collection_file_exists",
    "collection_to_document",
    "decode_collection",
    "delete_collection_file",
    "document_to_collection",
    "encode_collection",
    "get_decoded_collection",
    "get_location",
    "init_store",
    "list_collections",
    "read_open_collection_id",
    "save_collection",
    "write_open_collection_id",
]
