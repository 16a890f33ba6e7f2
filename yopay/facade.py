import logging

from django.conf import settings

from yopay import gateway, notifications
from yopay.exceptions import ResponseParseError

logger = logging.getLogger('yopay.facade')


class Facade(object):
    """
    A bridge between Django settings and the core gateway object

    A new gateway is built for every call so the per-call references passed
    here never leak into another request.
    """

    def __init__(self):
        self.config = {
            'username': settings.YOPAY_USERNAME,
            'password': settings.YOPAY_PASSWORD,
            'url': getattr(settings, 'YOPAY_URL', gateway.PRODUCTION_URL),
            'non_blocking': getattr(settings, 'YOPAY_NON_BLOCKING', False),
            'provider_reference_text': getattr(
                settings, 'YOPAY_PROVIDER_REFERENCE_TEXT', ''),
            'instant_notification_url': getattr(
                settings, 'YOPAY_INSTANT_NOTIFICATION_URL', ''),
            'failure_notification_url': getattr(
                settings, 'YOPAY_FAILURE_NOTIFICATION_URL', ''),
            'authentication_signature_base64': getattr(
                settings, 'YOPAY_AUTHENTICATION_SIGNATURE_BASE64', ''),
            'deposit_transaction_type': getattr(
                settings, 'YOPAY_DEPOSIT_TRANSACTION_TYPE', gateway.PULL),
            'certificate': getattr(
                settings, 'YOPAY_CERTIFICATE',
                notifications.GATEWAY_CERTIFICATE),
        }

    def get_gateway(self, external_reference='', internal_reference=''):
        return gateway.Gateway(external_reference=external_reference,
                               internal_reference=internal_reference,
                               **self.config)

    def handle_response(self, method, response, reference=''):
        if response.is_successful():
            logger.info("%s succeeded (ref: %s, status code: %s)", method,
                        reference or '-', response['StatusCode'])
        else:
            logger.warning("%s rejected by gateway (ref: %s, status code: %s, "
                           "message: %s)", method, reference or '-',
                           response['StatusCode'],
                           response['StatusMessage'] or response['ErrorMessage'])
        return response

    # ===
    # API
    # ===

    def deposit(self, msisdn, amount, narrative, external_reference='',
                internal_reference=''):
        """
        Ask a mobile money user to pay ``amount`` into our account
        """
        response = self.get_gateway(
            external_reference, internal_reference).deposit_funds(
                msisdn, amount, narrative)
        return self.handle_response(
            gateway.DEPOSIT_FUNDS, response, external_reference)

    def withdraw(self, msisdn, amount, narrative, external_reference='',
                 internal_reference=''):
        response = self.get_gateway(
            external_reference, internal_reference).withdraw_funds(
                msisdn, amount, narrative)
        return self.handle_response(
            gateway.WITHDRAW_FUNDS, response, external_reference)

    def transaction_status(self, transaction_reference='',
                           external_reference=''):
        """
        Look a transaction up by gateway reference or by our own reference
        """
        if not (transaction_reference or external_reference):
            raise ValueError("You must specify either a transaction reference "
                             "or an external reference")
        response = self.get_gateway().check_transaction_status(
            transaction_reference, external_reference)
        return self.handle_response(
            gateway.TRANSACTION_CHECK_STATUS, response,
            transaction_reference or external_reference)

    def transfer(self, currency_code, amount, beneficiary_account,
                 beneficiary_email, narrative, external_reference='',
                 internal_reference=''):
        response = self.get_gateway(
            external_reference, internal_reference).internal_transfer(
                currency_code, amount, beneficiary_account, beneficiary_email,
                narrative)
        return self.handle_response(
            gateway.INTERNAL_TRANSFER, response, external_reference)

    def balances(self):
        """
        Return a dict mapping currency code to balance
        """
        response = self.handle_response(
            gateway.ACCOUNT_BALANCE, self.get_gateway().get_account_balance())
        return dict((entry['Code'], entry['Balance'])
                    for entry in response.balances)

    def ministatement(self, **kwargs):
        response = self.get_gateway().get_ministatement(**kwargs)
        return self.handle_response(gateway.GET_MINISTATEMENT, response)

    def send_airtime(self, msisdn, amount, narrative, external_reference='',
                     internal_reference=''):
        response = self.get_gateway(
            external_reference, internal_reference).send_airtime_mobile(
                msisdn, amount, narrative)
        return self.handle_response(
            gateway.SEND_AIRTIME_MOBILE, response, external_reference)

    def send_airtime_to_account(self, currency_code, amount,
                                beneficiary_account, beneficiary_email,
                                narrative, external_reference='',
                                internal_reference=''):
        response = self.get_gateway(
            external_reference, internal_reference).send_airtime_internal(
                currency_code, amount, beneficiary_account, beneficiary_email,
                narrative)
        return self.handle_response(
            gateway.SEND_AIRTIME_INTERNAL, response, external_reference)

    def is_account_valid(self, msisdn):
        """
        Test whether ``msisdn`` is a registered mobile money account.

        An unreadable response counts as invalid.  Transport errors are
        raised.
        """
        try:
            response = self.get_gateway().verify_account_validity(msisdn)
        except ResponseParseError as e:
            logger.warning("Unreadable account validity response for %s: %s",
                           msisdn, e)
            return False
        return response.is_valid()

    def receive_payment_notification(self, date_time, amount, narrative,
                                     network_ref, external_ref, msisdn,
                                     signature):
        notification = self.get_gateway().receive_payment_notification(
            date_time, amount, narrative, network_ref, external_ref, msisdn,
            signature)
        if notification.verified:
            logger.info("Verified payment notification for external ref %s",
                        external_ref)
        return notification

    def receive_payment_failure_notification(self,
                                             failed_transaction_reference,
                                             transaction_init_date,
                                             verification):
        notification = self.get_gateway().receive_payment_failure_notification(
            failed_transaction_reference, transaction_init_date, verification)
        if notification.verified:
            logger.info("Verified failure notification for transaction %s",
                        failed_transaction_reference)
        return notification
