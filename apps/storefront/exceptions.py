class StorefrontError(Exception):
    """Error while talking to the Storefront API"""
    pass


class StorefrontTransportError(StorefrontError):
    """API unreachable, or its response could not be used"""
    pass


class StorefrontQueryError(StorefrontTransportError):
    """The GraphQL response carried an `errors` array"""

    def __init__(self, message, errors=None):
        super().__init__(message)
        self.errors = list(errors or [])

    @property
    def error_details(self):
        """Serializable subset of each GraphQL error."""
        return [
            {
                'message': err.get('message'),
                'extensions': err.get('extensions'),
                'locations': err.get('locations'),
            }
            for err in self.errors
            if isinstance(err, dict)
        ]
