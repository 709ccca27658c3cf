"""A small application used to exercise package discovery."""


class ApplicationSettings:
    def __init__(self):
        self.greeting = "Hello"
