from xml.dom.minidom import parseString
from xml.parsers.expat import ExpatError

from yopay.exceptions import ResponseParseError
from yopay.xmlutils import child_element, child_elements, child_text

# Values of the Status element
OK, ERROR = 'OK', 'ERROR'

# StatusCode values
SUCCEEDED, PENDING = '0', '1'

ENVELOPE = 'AutoCreate'


class Response(object):
    """
    Encapsulate a Yo! Payments response

    Every response keeps the request XML that produced it and the HTTP status
    code it arrived with, so the diagnostics of one call never bleed into
    another.  Values are read with dict access using the gateway's element
    names, eg ``response['StatusCode']``.  Elements the gateway left out read
    as an empty string.
    """
    fields = ('Status', 'StatusCode', 'StatusMessage', 'ErrorMessageCode',
              'ErrorMessage')

    def __init__(self, request_xml, response_xml, status_code=200):
        self.request_xml = request_xml
        self.response_xml = response_xml
        self.status_code = status_code
        self.data = self._extract_data(self._get_response_element())

    def _get_response_element(self):
        try:
            doc = parseString(self.response_xml)
        except ExpatError as e:
            raise ResponseParseError(
                str(e), request_xml=self.request_xml,
                response_xml=self.response_xml,
                status_code=self.status_code) from e
        root = doc.documentElement
        if root.tagName != ENVELOPE:
            raise ResponseParseError(
                "expected element type <%s> but have <%s>" % (
                    ENVELOPE, root.tagName),
                request_xml=self.request_xml,
                response_xml=self.response_xml,
                status_code=self.status_code)
        return child_element(root, 'Response')

    def _extract_data(self, ele):
        return dict((field, child_text(ele, field)) for field in self.fields)

    def __getitem__(self, key):
        return self.data[key]

    def __contains__(self, key):
        return key in self.data

    def get(self, key, default=None):
        return self.data.get(key, default)

    def __str__(self):
        if isinstance(self.response_xml, bytes):
            return self.response_xml.decode('utf-8', 'replace')
        return self.response_xml

    def __repr__(self):
        return '<%s status=%r status_code=%r>' % (
            self.__class__.__name__, self.get('Status'),
            self.get('StatusCode'))

    @property
    def status(self):
        return self.data['Status']

    def is_successful(self):
        return self.data['Status'] == OK

    def is_pending(self):
        return self.is_successful() and self.data['StatusCode'] == PENDING


class TransactionResponse(Response):
    """
    Response to the requests that move money or airtime: deposits,
    withdrawals, internal transfers and both airtime requests.
    """
    fields = Response.fields + (
        'TransactionStatus', 'TransactionReference',
        'MNOTransactionReferenceId', 'IssuedReceiptNumber')

    @property
    def transaction_reference(self):
        return self.data['TransactionReference']


class TransactionStatusResponse(TransactionResponse):
    fields = TransactionResponse.fields + (
        'Amount', 'AmountFormatted', 'CurrencyCode',
        'TransactionInitiationDate', 'TransactionCompletionDate')


class BalanceResponse(Response):
    """
    Balances of the account, one entry per currency (airtime included).

    ``response['Balance']`` is a list of dicts with ``Code`` and ``Balance``
    keys.
    """

    def _extract_data(self, ele):
        data = super(BalanceResponse, self)._extract_data(ele)
        data['Balance'] = [
            {'Code': child_text(currency, 'Code'),
             'Balance': child_text(currency, 'Balance')}
            for currency in child_elements(child_element(ele, 'Balance'),
                                           'Currency')]
        return data

    @property
    def balances(self):
        return self.data['Balance']


class MiniStatementResponse(Response):
    fields = Response.fields + ('TotalTransactions', 'ReturnedTransactions')
    transaction_fields = (
        'TransactionSystemId', 'TransactionReference', 'TransactionStatus',
        'InitiationDate', 'CompletionDate', 'NarrativeBase64', 'Currency',
        'Amount', 'Balance', 'GeneralType', 'DetailedType',
        'BeneficiaryMsisdn', 'BeneficiaryBase64', 'SenderMsisdn',
        'SenderBase64', 'Base64TransactionExternalReference',
        'TransactionEntryDesignation')

    def _extract_data(self, ele):
        data = super(MiniStatementResponse, self)._extract_data(ele)
        transactions = child_elements(child_element(ele, 'Transactions'),
                                      'Transaction')
        data['Transactions'] = [
            dict((field, child_text(txn, field))
                 for field in self.transaction_fields)
            for txn in transactions]
        return data

    @property
    def transactions(self):
        return self.data['Transactions']


class AccountValidityResponse(Response):
    """
    Answer to an account validity check.

    The gateway may wrap ``Status`` and ``Valid`` in a second ``Response``
    element, so fields missing at the top level are read from there.
    """
    fields = Response.fields + ('Valid',)

    def _extract_data(self, ele):
        data = super(AccountValidityResponse, self)._extract_data(ele)
        inner = child_element(ele, 'Response')
        for field in self.fields:
            if not data[field]:
                data[field] = child_text(inner, field)
        return data

    def is_valid(self):
        return self.data['Status'] == OK and self.data['Valid'] == 'TRUE'
