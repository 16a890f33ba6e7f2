import http.client
import logging
import ssl
from urllib.parse import urlsplit
from xml.dom.minidom import Document

from yopay import notifications, responses
from yopay.exceptions import GatewayError
from yopay.xmlutils import create_element

logger = logging.getLogger('yopay.gateway')

# Endpoints
PRODUCTION_URL = 'https://paymentsapi1.yo.co.ug/ybs/task.php'
SECONDARY_URL = 'https://paymentsapi2.yo.co.ug/ybs/task.php'
SANDBOX_URL = 'https://41.220.12.206/services/yopaymentsdev/task.php'

# Methods
DEPOSIT_FUNDS = 'acdepositfunds'
TRANSACTION_CHECK_STATUS = 'actransactioncheckstatus'
INTERNAL_TRANSFER = 'acinternaltransfer'
ACCOUNT_BALANCE = 'acacctbalance'
GET_MINISTATEMENT = 'acgetministatement'
SEND_AIRTIME_MOBILE = 'acsendairtimemobile'
SEND_AIRTIME_INTERNAL = 'acsendairtimeinternal'
VERIFY_ACCOUNT_VALIDITY = 'acverifyaccountvalidity'
WITHDRAW_FUNDS = 'acwithdrawfunds'

# Deposit transaction types
PULL, PUSH = 'PULL', 'PUSH'

# Mini statement entry designations
TRANSACTION, CHARGES, ANY = 'TRANSACTION', 'CHARGES', 'ANY'

TIMEOUT = 180


class Gateway(object):
    """
    Client for the Yo! Payments API

    The optional references and notification URLs are plain attributes: set
    them before a call and they are sent with every request that accepts
    them.  Text is escaped when the request is serialised, so pass values
    unescaped.
    """

    def __init__(self, username, password, url=PRODUCTION_URL,
                 non_blocking=False, external_reference='',
                 internal_reference='', provider_reference_text='',
                 instant_notification_url='', failure_notification_url='',
                 authentication_signature_base64='',
                 deposit_transaction_type=PULL,
                 certificate=notifications.GATEWAY_CERTIFICATE,
                 timeout=TIMEOUT):
        if urlsplit(url).scheme not in ('http', 'https'):
            raise ValueError("Gateway URL must be an http(s) URL: %r" % url)
        if deposit_transaction_type not in (PULL, PUSH):
            raise ValueError("Deposit transaction type must be PULL or PUSH")
        self.username = username
        self.password = password
        self.url = url
        self.non_blocking = non_blocking
        self.external_reference = external_reference
        self.internal_reference = internal_reference
        self.provider_reference_text = provider_reference_text
        self.instant_notification_url = instant_notification_url
        self.failure_notification_url = failure_notification_url
        self.authentication_signature_base64 = authentication_signature_base64
        self.deposit_transaction_type = deposit_transaction_type
        self.certificate = certificate
        self.timeout = timeout

    def _get_connection(self):
        parts = urlsplit(self.url)
        if parts.scheme == 'http':
            return http.client.HTTPConnection(
                parts.hostname, parts.port, timeout=self.timeout)
        # The gateway's certificate chain is not validated
        context = ssl.create_default_context()
        context.check_hostname = False
        context.verify_mode = ssl.CERT_NONE
        return http.client.HTTPSConnection(
            parts.hostname, parts.port, timeout=self.timeout, context=context)

    def _fetch_response_xml(self, request_xml):
        parts = urlsplit(self.url)
        path = parts.path or '/'
        if parts.query:
            path += '?' + parts.query
        headers = {"Content-Type": "text/xml; charset=utf-8"}
        conn = self._get_connection()
        try:
            conn.request("POST", path, request_xml.encode('utf-8'), headers)
            response = conn.getresponse()
            response_xml = response.read()
        except (OSError, http.client.HTTPException) as e:
            logger.error("Error communicating with %s: %s", self.url, e)
            raise GatewayError(
                "Unable to communicate with payment gateway: %s" % e,
                request_xml=request_xml) from e
        finally:
            conn.close()
        if response.status != http.client.OK:
            logger.error("Gateway returned HTTP %s %s", response.status,
                         response.reason)
            raise GatewayError(
                "Unable to communicate with payment gateway (code: %s %s, "
                "response: %s)" % (response.status, response.reason,
                                   response_xml),
                request_xml=request_xml, response_xml=response_xml,
                status_code=response.status)
        return response_xml

    def _build_request_xml(self, method_name, fields=()):
        """
        Builds the XML for a request

        ``fields`` is a sequence of (tag, value) pairs in the order the
        gateway expects them.  Pairs with a value of None are skipped.
        """
        doc = Document()
        envelope = create_element(doc, doc, 'AutoCreate')
        req = create_element(doc, envelope, 'Request')

        # Authentication
        create_element(doc, req, 'APIUsername', self.username)
        create_element(doc, req, 'APIPassword', self.password)
        create_element(doc, req, 'Method', method_name)

        for tag, value in fields:
            if value is not None:
                create_element(doc, req, tag, value)

        return doc.toxml(encoding='UTF-8').decode('utf-8')

    def _do_request(self, method, response_class, fields=()):
        request_xml = self._build_request_xml(method, fields)
        logger.debug("Sending %s request to %s", method, self.url)
        response_xml = self._fetch_response_xml(request_xml)
        response = response_class(request_xml, response_xml, http.client.OK)
        logger.debug("Received %s response with status %s (%s)", method,
                     response['Status'], response['StatusCode'])
        return response

    # Optional fields.  These return None when the field should be left out.

    def _optional(self, value):
        if value:
            return value
        return None

    def _non_blocking(self):
        if self.non_blocking:
            return 'TRUE'
        return None

    def _amount(self, amount):
        # Whole numbers only, the gateway has no fractional units
        if isinstance(amount, bool) or int(amount) != amount:
            raise ValueError("Amount must be a whole number in the smallest "
                             "currency unit: %r" % (amount,))
        return '%d' % amount

    # ===
    # API
    # ===

    def deposit_funds(self, msisdn, amount, narrative):
        """
        Request a mobile money user to deposit funds into your account.

        Shortly after the request is submitted the user is prompted on their
        phone to authorise the transfer out of their account.  Not every
        mobile money network supports this request.

        * msisdn: the mobile money phone number, eg 256772123456
        * amount: integer amount in the smallest currency unit
        * narrative: the reason for the deposit
        """
        return self._do_request(DEPOSIT_FUNDS, responses.TransactionResponse, (
            ('Account', msisdn),
            ('Amount', self._amount(amount)),
            ('Narrative', narrative),
            ('ExternalReference', self._optional(self.external_reference)),
            ('InternalReference', self._optional(self.internal_reference)),
            ('ProviderReferenceText',
             self._optional(self.provider_reference_text)),
            ('NonBlocking', self._non_blocking()),
            ('InstantNotificationUrl',
             self._optional(self.instant_notification_url)),
            ('FailureNotificationUrl',
             self._optional(self.failure_notification_url)),
            ('AuthenticationSignatureBase64',
             self._optional(self.authentication_signature_base64)),
        ))

    def check_transaction_status(self, transaction_reference='',
                                 private_transaction_reference=''):
        """
        Check the status of an earlier transaction.

        Mostly useful after a non-blocking request.  Identify the transaction
        either by the gateway's transaction reference or by the external
        reference it was submitted with.
        """
        return self._do_request(
            TRANSACTION_CHECK_STATUS, responses.TransactionStatusResponse, (
                ('DepositTransactionType', self.deposit_transaction_type),
                ('TransactionReference',
                 self._optional(transaction_reference)),
                ('PrivateTransactionReference',
                 self._optional(private_transaction_reference)),
            ))

    def internal_transfer(self, currency_code, amount, beneficiary_account,
                          beneficiary_email, narrative):
        """
        Transfer funds to another Yo! Payments account

        currency_code is one of the gateway's account currencies, eg
        UGX-MTNMM (MTN Mobile Money) or UGX-MTNAT (MTN Airtime).
        """
        return self._do_request(
            INTERNAL_TRANSFER, responses.TransactionResponse, (
                ('CurrencyCode', currency_code),
                ('BeneficiaryAccount', beneficiary_account),
                ('BeneficiaryEmail', beneficiary_email),
                ('Narrative', narrative),
                ('Amount', self._amount(amount)),
                ('InternalReference', self._optional(self.internal_reference)),
                ('ExternalReference', self._optional(self.external_reference)),
            ))

    def get_account_balance(self):
        """
        Fetch the balances of your account, one per currency
        """
        return self._do_request(ACCOUNT_BALANCE, responses.BalanceResponse)

    def get_ministatement(self, start_date='', end_date='',
                          transaction_status='', currency_code='',
                          result_set_limit='', transaction_entry_designation='',
                          external_reference=''):
        """
        Fetch the transactions carried out on your account.

        * start_date, end_date: 'YYYY-MM-DD HH:MM:SS'
        * transaction_status: FAILED, PENDING, INDETERMINATE, SUCCEEDED or a
          comma separated combination
        * currency_code: eg UGX-MTNMM
        * result_set_limit: 0 returns everything, the gateway defaults to 15
        * transaction_entry_designation: TRANSACTION, CHARGES or ANY
          (the default)
        * external_reference: only return transactions with this reference
        """
        if not transaction_entry_designation:
            transaction_entry_designation = ANY
        if result_set_limit is not None:
            result_set_limit = '%s' % result_set_limit
        return self._do_request(
            GET_MINISTATEMENT, responses.MiniStatementResponse, (
                ('TransactionEntryDesignation', transaction_entry_designation),
                ('StartDate', self._optional(start_date)),
                ('EndDate', self._optional(end_date)),
                ('TransactionStatus', self._optional(transaction_status)),
                ('CurrencyCode', self._optional(currency_code)),
                ('ResultSetLimit', self._optional(result_set_limit)),
                ('ExternalReference', self._optional(external_reference)),
            ))

    def send_airtime_mobile(self, msisdn, amount, narrative):
        """
        Send airtime to a mobile phone user
        """
        return self._do_request(
            SEND_AIRTIME_MOBILE, responses.TransactionResponse, (
                ('Account', msisdn),
                ('Amount', self._amount(amount)),
                ('Narrative', narrative),
                ('NonBlocking', self._non_blocking()),
                ('ExternalReference', self._optional(self.external_reference)),
                ('InternalReference', self._optional(self.internal_reference)),
                ('ProviderReferenceText',
                 self._optional(self.provider_reference_text)),
            ))

    def send_airtime_internal(self, currency_code, amount, beneficiary_account,
                              beneficiary_email, narrative):
        """
        Send airtime to another Yo! Payments account

        currency_code is an airtime currency, eg UGX-MTNAT or UGX-AIRAT.
        """
        return self._do_request(
            SEND_AIRTIME_INTERNAL, responses.TransactionResponse, (
                ('Amount', self._amount(amount)),
                ('Narrative', narrative),
                ('CurrencyCode', currency_code),
                ('BeneficiaryAccount', beneficiary_account),
                ('BeneficiaryEmail', beneficiary_email),
                ('InternalReference', self._optional(self.internal_reference)),
                ('ExternalReference', self._optional(self.external_reference)),
            ))

    def verify_account_validity(self, msisdn):
        """
        Check whether a mobile money account exists.  Use ``is_valid()`` on
        the returned response.
        """
        return self._do_request(
            VERIFY_ACCOUNT_VALIDITY, responses.AccountValidityResponse, (
                ('Account', msisdn),
            ))

    def withdraw_funds(self, msisdn, amount, narrative):
        """
        Withdraw funds from your account to a mobile money user.

        This request needs an API access letter from Yo! Payments.  Guard it
        well, a leaked password here drains the account.
        """
        return self._do_request(
            WITHDRAW_FUNDS, responses.TransactionResponse, (
                ('NonBlocking', self._non_blocking()),
                ('Account', msisdn),
                ('Amount', self._amount(amount)),
                ('Narrative', narrative),
                ('ExternalReference', self._optional(self.external_reference)),
                ('InternalReference', self._optional(self.internal_reference)),
                ('ProviderReferenceText',
                 self._optional(self.provider_reference_text)),
            ))

    # Notifications pushed to us by the gateway.  No request is made.

    def get_verifier(self):
        return notifications.SignatureVerifier(self.certificate)

    def receive_payment_notification(self, date_time, amount, narrative,
                                     network_ref, external_ref, msisdn,
                                     signature):
        return notifications.receive_payment_notification(
            self.get_verifier(), date_time, amount, narrative, network_ref,
            external_ref, msisdn, signature)

    def receive_payment_failure_notification(self,
                                             failed_transaction_reference,
                                             transaction_init_date,
                                             verification):
        return notifications.receive_payment_failure_notification(
            self.get_verifier(), failed_transaction_reference,
            transaction_init_date, verification)
