"""Character, memory, string, line-reading, linked-list and output helpers."""