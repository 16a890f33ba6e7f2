class YoPaymentsError(Exception):
    """
    Base class for all errors raised by this package
    """


class GatewayError(YoPaymentsError):
    """
    Unable to communicate with the gateway, or the gateway returned a
    non-200 HTTP status.
    """

    def __init__(self, message, request_xml=None, response_xml=None,
                 status_code=None):
        super(GatewayError, self).__init__(message)
        self.request_xml = request_xml
        self.response_xml = response_xml
        self.status_code = status_code


class ResponseParseError(GatewayError):
    """
    The gateway answered with HTTP 200 but the body is not a response
    document we can read.
    """


class SignatureError(YoPaymentsError):
    pass


class InvalidSignatureEncoding(SignatureError):
    """
    The signature passed with a notification is not valid base64
    """


class InvalidCertificate(SignatureError):
    """
    The trust anchor certificate can't be loaded
    """


class SignatureMismatch(SignatureError):
    """
    The signature does not match the notification data
    """
