class QueryBus:
    """Routes read-only election queries to their handlers by query class."""

    def __init__(self):
        self.handlers = {}

    def register_handler(self, query_type, handler):
        self.handlers[query_type] = handler

    def handle(self, query):
        handler = self.handlers.get(type(query))
        if handler is None:
            raise ValueError(f"No handler registered for query type: {type(query).__name__}")
        return handler.handle(query)


query_bus = QueryBus()
