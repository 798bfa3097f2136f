class Constants:
    # Side length of the adjacency matrix of a graph constructed without one
    DEFAULT_CAPACITY = 10

    # Capacity multiplier applied when add_vertex finds the graph full
    GROWTH_FACTOR = 2
