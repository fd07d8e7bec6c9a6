from .assembler import RequestParams as RequestParams, DuplicateKeyPolicy as DuplicateKeyPolicy
