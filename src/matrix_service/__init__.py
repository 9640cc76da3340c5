"""HTTP service that echoes, transposes, flattens, sums and multiplies uploaded CSV matrices."""
