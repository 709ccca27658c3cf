raise RuntimeError("sample package that cannot be imported")
