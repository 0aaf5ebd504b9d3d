"""Fixed-point numbers, vectors and sprite lists."""