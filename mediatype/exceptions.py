class MediaTypeException(Exception):
    pass


class InvalidMimeSyntax(MediaTypeException, ValueError):
    """
    Raised when a media type, or one of its parts, does not follow the HTTP media type grammar.

    production is the grammar element that failed ("type", "subtype", "parameter name" or "parameter value"),
    text is the string being checked and invalid_index the position of the offending character,
    or -1 when the failure is an absence rather than a bad character.
    """

    def __init__(self, production: str, text: str, invalid_index: int=-1, *args) -> None:
        message = f'The MIME syntax for a {production} in "{text}" is invalid'
        if invalid_index != -1:
            message += f" at {invalid_index}"
        super().__init__(message, *args)
        self.production = production
        self.text = text
        self.invalid_index = invalid_index
