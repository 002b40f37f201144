"""Graph layer: the lazy graph model, traversals, paths, and combinators."""
