"""RFC 3492 bootstring core."""
