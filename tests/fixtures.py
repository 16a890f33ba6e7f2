SAMPLE_RESPONSE = """<?xml version="1.0" encoding="UTF-8"?>
<AutoCreate>
    <Response>
        <Status>OK</Status>
        <StatusCode>0</StatusCode>
        <TransactionStatus>SUCCEEDED</TransactionStatus>
        <TransactionReference>X7P2RM8J4K</TransactionReference>
        <MNOTransactionReferenceId>1234567890</MNOTransactionReferenceId>
        <IssuedReceiptNumber>RCPT-0042</IssuedReceiptNumber>
    </Response>
</AutoCreate>"""

SAMPLE_MINIMAL_RESPONSE = """<AutoCreate><Response><Status>OK</Status><StatusCode>0</StatusCode></Response></AutoCreate>"""

SAMPLE_PENDING_RESPONSE = """<?xml version="1.0" encoding="UTF-8"?>
<AutoCreate>
    <Response>
        <Status>OK</Status>
        <StatusCode>1</StatusCode>
        <TransactionStatus>PENDING</TransactionStatus>
        <TransactionReference>P9Q3ST5U7V</TransactionReference>
    </Response>
</AutoCreate>"""

SAMPLE_ERROR_RESPONSE = """<?xml version="1.0" encoding="UTF-8"?>
<AutoCreate>
    <Response>
        <Status>ERROR</Status>
        <StatusCode>-22</StatusCode>
        <StatusMessage>Insufficient balance</StatusMessage>
        <ErrorMessageCode>-22</ErrorMessageCode>
        <ErrorMessage>Your account balance is insufficient for this transaction</ErrorMessage>
    </Response>
</AutoCreate>"""

SAMPLE_TRANSACTION_STATUS_RESPONSE = """<?xml version="1.0" encoding="UTF-8"?>
<AutoCreate>
    <Response>
        <Status>OK</Status>
        <StatusCode>0</StatusCode>
        <TransactionStatus>SUCCEEDED</TransactionStatus>
        <TransactionReference>X7P2RM8J4K</TransactionReference>
        <MNOTransactionReferenceId>1234567890</MNOTransactionReferenceId>
        <Amount>10000</Amount>
        <AmountFormatted>10,000</AmountFormatted>
        <CurrencyCode>UGX-MTNMM</CurrencyCode>
        <TransactionInitiationDate>2016-03-01 10:15:22</TransactionInitiationDate>
        <TransactionCompletionDate>2016-03-01 10:16:03</TransactionCompletionDate>
    </Response>
</AutoCreate>"""

SAMPLE_BALANCE_RESPONSE = """<?xml version="1.0" encoding="UTF-8"?>
<AutoCreate>
    <Response>
        <Status>OK</Status>
        <StatusCode>0</StatusCode>
        <Balance>
            <Currency>
                <Code>UGX-MTNMM</Code>
                <Balance>250000</Balance>
            </Currency>
            <Currency>
                <Code>UGX-MTNAT</Code>
                <Balance>12000</Balance>
            </Currency>
        </Balance>
    </Response>
</AutoCreate>"""

SAMPLE_MINISTATEMENT_RESPONSE = """<?xml version="1.0" encoding="UTF-8"?>
<AutoCreate>
    <Response>
        <Status>OK</Status>
        <StatusCode>0</StatusCode>
        <TotalTransactions>2</TotalTransactions>
        <ReturnedTransactions>2</ReturnedTransactions>
        <Transactions>
            <Transaction>
                <TransactionSystemId>5001</TransactionSystemId>
                <TransactionReference>X7P2RM8J4K</TransactionReference>
                <TransactionStatus>SUCCEEDED</TransactionStatus>
                <InitiationDate>2016-03-01 10:15:22</InitiationDate>
                <CompletionDate>2016-03-01 10:16:03</CompletionDate>
                <NarrativeBase64>SW52b2ljZSAxMDAx</NarrativeBase64>
                <Currency>UGX-MTNMM</Currency>
                <Amount>10000</Amount>
                <Balance>250000</Balance>
                <GeneralType>DEPOSIT</GeneralType>
                <DetailedType>MOBILE MONEY DEPOSIT</DetailedType>
                <BeneficiaryMsisdn></BeneficiaryMsisdn>
                <BeneficiaryBase64></BeneficiaryBase64>
                <SenderMsisdn>256772123456</SenderMsisdn>
                <SenderBase64>Sm9obiBEb2U=</SenderBase64>
                <Base64TransactionExternalReference>SU5WLTEwMDE=</Base64TransactionExternalReference>
                <TransactionEntryDesignation>TRANSACTION</TransactionEntryDesignation>
            </Transaction>
            <Transaction>
                <TransactionSystemId>5002</TransactionSystemId>
                <TransactionReference>X7P2RM8J4K</TransactionReference>
                <TransactionStatus>SUCCEEDED</TransactionStatus>
                <Currency>UGX-MTNMM</Currency>
                <Amount>-150</Amount>
                <Balance>249850</Balance>
                <TransactionEntryDesignation>CHARGES</TransactionEntryDesignation>
            </Transaction>
        </Transactions>
    </Response>
</AutoCreate>"""

SAMPLE_VALID_ACCOUNT_RESPONSE = """<?xml version="1.0" encoding="UTF-8"?>
<AutoCreate>
    <Response>
        <Status>OK</Status>
        <StatusCode>0</StatusCode>
        <Valid>TRUE</Valid>
    </Response>
</AutoCreate>"""

SAMPLE_INVALID_ACCOUNT_RESPONSE = """<?xml version="1.0" encoding="UTF-8"?>
<AutoCreate>
    <Response>
        <Status>OK</Status>
        <StatusCode>0</StatusCode>
        <Valid>FALSE</Valid>
    </Response>
</AutoCreate>"""

SAMPLE_NESTED_VALID_ACCOUNT_RESPONSE = """<?xml version="1.0" encoding="UTF-8"?>
<AutoCreate>
    <Response>
        <Response>
            <Status>OK</Status>
            <Valid>TRUE</Valid>
        </Response>
    </Response>
</AutoCreate>"""

SAMPLE_MALFORMED_RESPONSE = """<?xml version="1.0" encoding="UTF-8"?>
<AutoCreate><Response><Status>OK</Status></AutoCreate>"""

SAMPLE_HTML_ERROR_PAGE = """<html><body><h1>502 Bad Gateway</h1></body></html>"""
