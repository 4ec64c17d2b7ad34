def read_file(filename: str):
    with open(filename, 'r') as f:
        return f.read()
