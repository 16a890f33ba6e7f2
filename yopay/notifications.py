"""
Verification of the notifications Yo! Payments pushes to the integrator

When a deposit completes the gateway POSTs the payment details to the
instant notification URL, and when one fails it POSTs to the failure
notification URL.  Both carry a base64 RSA signature over a concatenation of
the other fields, made with the gateway's private key.  We check it with the
public key of the gateway's certificate.
"""
import base64
import binascii
import logging

from cryptography import x509
from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import padding, rsa

from yopay.exceptions import (InvalidCertificate, InvalidSignatureEncoding,
                              SignatureError, SignatureMismatch)

logger = logging.getLogger('yopay.notifications')

GATEWAY_CERTIFICATE = """-----BEGIN CERTIFICATE-----
MIIEvTCCA6WgAwIBAgIJAN3e7VqDg5zQMA0GCSqGSIb3DQEBBQUAMIGaMQswCQYD
VQQGEwJVRzEQMA4GA1UECBMHS2FtcGFsYTEQMA4GA1UEBxMHS2FtcGFsYTEbMBkG
A1UECgwSWW8hIFVnYW5kYSBMaW1pdGVkMRUwEwYDVQQLDAxZbyEgUGF5bWVudHMx
FTATBgNVBAMTDHd3dy55by5jby51ZzEcMBoGCSqGSIb3DQEJARYNaW5mb0B5by5j
by51ZzAeFw0xMzA4MDkwNTQyMTRaFw0yMzA4MDcwNTQyMTRaMIGaMQswCQYDVQQG
EwJVRzEQMA4GA1UECBMHS2FtcGFsYTEQMA4GA1UEBxMHS2FtcGFsYTEbMBkGA1UE
CgwSWW8hIFVnYW5kYSBMaW1pdGVkMRUwEwYDVQQLDAxZbyEgUGF5bWVudHMxFTAT
BgNVBAMTDHd3dy55by5jby51ZzEcMBoGCSqGSIb3DQEJARYNaW5mb0B5by5jby51
ZzCCASIwDQYJKoZIhvcNAQEBBQADggEPADCCAQoCggEBAPPo+N67Z56ebScXJ9tX
tFpSNBNNyDlqU/X8bqouZjWuvxpWOI4xZkPKXi0t205ooVbQL/+962NASjJRrouQ
IUhJq7xhwb+KKcWyFpA25742mNgaxeZJa9iofiHeKotBvHz6pswuqa2gXAyTTmYf
j6BOIFhDeUffOjfJYbzACy7WLtbK6VIRSTHypQY+zMQluw1euyY8524GYzf8E+c5
9qjIa5YY5PPianvvR25VDNRCm0Z6GPolhIGvYPUWHFZx+HtU8xoZumi5Kddvipew
uujxNVBRyQ8bVRoYxKKuDMFHiXA6V01oPzSOtfPK7JI+rd2JFU7dQgbFxTXI9+Qx
2yUCAwEAAaOCAQIwgf8wHQYDVR0OBBYEFPj0nwwE8lJByx243yV6cfXbTKbhMIHP
BgNVHSMEgccwgcSAFPj0nwwE8lJByx243yV6cfXbTKbhoYGgpIGdMIGaMQswCQYD
VQQGEwJVRzEQMA4GA1UECBMHS2FtcGFsYTEQMA4GA1UEBxMHS2FtcGFsYTEbMBkG
A1UECgwSWW8hIFVnYW5kYSBMaW1pdGVkMRUwEwYDVQQLDAxZbyEgUGF5bWVudHMx
FTATBgNVBAMTDHd3dy55by5jby51ZzEcMBoGCSqGSIb3DQEJARYNaW5mb0B5by5j
by51Z4IJAN3e7VqDg5zQMAwGA1UdEwQFMAMBAf8wDQYJKoZIhvcNAQEFBQADggEB
AGCaUMHBxGVtVsA8xMDWknjH6hV9yuca3s0qRrOoMfM7nyOjeYtUNgZlsLxuX2n3
FhoeK9DUBvIKVSlVfO5SXgsXyWKG54YFEkZ8D50Krsyl5NCfaAJezkQ0MNdtpG98
wlD/cYa6C6DC/s1eilUbI5QqaxLo+EFy5VuHQ8tAuxJbNTVPMW9GvTjxofeMUnug
SxUMDqHmEkzbQV7yCBVqf3yi4XOM4/6B7Tr6gaandpuR+v2XaKl4SOf8G5svn96g
Kn+Bk8p6rlBWAl+5hWxHWi4dkjiLsk8q+aeKh6ibwYtRjEt/sbWTgJAZjI1mTT8d
wsLYlL7k1O3wCjUeMQzi274=
-----END CERTIFICATE-----
"""


class SignatureVerifier(object):
    """
    Checks signatures against the public key of a trust anchor certificate.

    The certificate is parsed for every verification; its validity period is
    not checked as the gateway keeps signing with the same key.
    """

    def __init__(self, certificate=GATEWAY_CERTIFICATE):
        self.certificate = certificate

    def public_key(self):
        pem = self.certificate
        try:
            if not isinstance(pem, bytes):
                pem = pem.encode('ascii')
            cert = x509.load_pem_x509_certificate(pem)
        except ValueError as e:
            # Non-ASCII text raises UnicodeEncodeError, a ValueError
            raise InvalidCertificate(
                "Unable to load trust anchor certificate: %s" % e) from e
        key = cert.public_key()
        if not isinstance(key, rsa.RSAPublicKey):
            raise InvalidCertificate(
                "Trust anchor certificate does not hold an RSA public key")
        return key

    def verify(self, data, signature):
        """
        Verify a base64 ``signature`` over the string ``data``.

        Returns True or raises a ``SignatureError`` subclass.  Line breaks in
        the signature are ignored, any other non-alphabet character is an
        error.
        """
        if signature is None:
            raise InvalidSignatureEncoding("Signature is missing")
        try:
            sig = base64.b64decode(
                signature.replace('\r', '').replace('\n', ''), validate=True)
        except (binascii.Error, ValueError) as e:
            raise InvalidSignatureEncoding(
                "Signature is not valid base64: %s" % e) from e
        key = self.public_key()
        try:
            key.verify(sig, data.encode('utf-8'), padding.PKCS1v15(),
                       hashes.SHA1())
        except InvalidSignature as e:
            raise SignatureMismatch(
                "Signature does not match notification data") from e
        return True

    def verify_payment(self, date_time, amount, narrative, network_ref,
                       external_ref, msisdn, signature):
        data = date_time + amount + narrative + network_ref + external_ref + msisdn
        return self.verify(data, signature)

    def verify_payment_failure(self, failed_transaction_reference,
                               transaction_init_date, verification):
        data = failed_transaction_reference + transaction_init_date
        return self.verify(data, verification)


class Notification(object):
    fields = ()

    def __init__(self, verified=False, error=None, **kwargs):
        self.verified = verified
        self.error = error
        for field in self.fields:
            setattr(self, field, kwargs.get(field, ''))

    def as_dict(self):
        return dict((field, getattr(self, field)) for field in self.fields)

    def __repr__(self):
        return '<%s verified=%r>' % (self.__class__.__name__, self.verified)


class PaymentNotification(Notification):
    """
    A successful payment, as posted to the instant notification URL
    """
    fields = ('date_time', 'amount', 'narrative', 'network_ref',
              'external_ref', 'msisdn', 'signature')


class PaymentFailureNotification(Notification):
    """
    A failed transaction, as posted to the failure notification URL
    """
    fields = ('failed_transaction_reference', 'transaction_init_date',
              'verification')


def receive_payment_notification(verifier, date_time, amount, narrative,
                                 network_ref, external_ref, msisdn, signature):
    notification = PaymentNotification(
        date_time=date_time, amount=amount, narrative=narrative,
        network_ref=network_ref, external_ref=external_ref, msisdn=msisdn,
        signature=signature)
    try:
        notification.verified = verifier.verify_payment(
            date_time, amount, narrative, network_ref, external_ref, msisdn,
            signature)
    except SignatureError as e:
        logger.warning("Payment notification with network ref %s failed "
                       "verification: %s", network_ref, e)
        notification.error = e
    return notification


def receive_payment_failure_notification(verifier,
                                         failed_transaction_reference,
                                         transaction_init_date, verification):
    notification = PaymentFailureNotification(
        failed_transaction_reference=failed_transaction_reference,
        transaction_init_date=transaction_init_date,
        verification=verification)
    try:
        notification.verified = verifier.verify_payment_failure(
            failed_transaction_reference, transaction_init_date, verification)
    except SignatureError as e:
        logger.warning("Failure notification for transaction %s failed "
                       "verification: %s", failed_transaction_reference, e)
        notification.error = e
    return notification
