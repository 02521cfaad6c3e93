"""
sgd_gbp.py - Singapore → London corridor (SGD → GBP)

DBS → HSBC Singapore → HSBC London → Barclays.
FX happens at HSBC Singapore (SGD→GBP), final leg settles over CHAPS.
"""

from __future__ import annotations

from ..core import Corridor
from .common import (
    UETR, PACS_002, PACS_008, PACS_009, CAMT_054, END_TO_END_STATUS,
    backward, bank, forward,
)


BANKS = (
    bank('DBS Bank', 'DBSSSGSG', 'Singapore', 'SG', 'originator'),
    bank('HSBC', 'HSBCSGSG', 'Singapore', 'SG', 'correspondent'),
    bank('HSBC London', 'HSBCGB2L', 'United Kingdom', 'GB', 'intermediary'),
    bank('Barclays', 'BARCGB22', 'United Kingdom', 'GB', 'beneficiary'),
)


SERIAL_STEPS = (
    forward(
        1, 0, 1, PACS_008,
        description='DBS initiates transfer to HSBC Singapore',
        duration='~2 min', fee=35,
        nostro_action='Debit: DBS debits customer SGD account',
        template=f"""
<FIToFICstmrCdtTrf>
  <GrpHdr>
    <MsgId>DBS-2026021800001</MsgId>
    <CreDtTm>2026-02-18T09:15:00+08:00</CreDtTm>
    <NbOfTxs>1</NbOfTxs>
    <SttlmInf><SttlmMtd>INDA</SttlmMtd></SttlmInf>
    <InstgAgt><FinInstnId><BICFI>DBSSSGSG</BICFI></FinInstnId></InstgAgt>
    <InstdAgt><FinInstnId><BICFI>HSBCSGSG</BICFI></FinInstnId></InstdAgt>
  </GrpHdr>
  <CdtTrfTxInf>
    <PmtId>
      <InstrId>DBS-INS-0001</InstrId>
      <EndToEndId>E2E-SGD-GBP-001</EndToEndId>
      <UETR>{UETR}</UETR>
    </PmtId>
    <IntrBkSttlmAmt Ccy="SGD">49965.00</IntrBkSttlmAmt>
    <ChrgBr>SHAR</ChrgBr>
    <DbtrAgt><FinInstnId><BICFI>DBSSSGSG</BICFI></FinInstnId></DbtrAgt>
    <CdtrAgt><FinInstnId><BICFI>BARCGB22</BICFI></FinInstnId></CdtrAgt>
  </CdtTrfTxInf>
</FIToFICstmrCdtTrf>""",
        detail='DBS validates KYC/AML, debits sender account, generates UETR, sends pacs.008 to '
               'correspondent HSBC Singapore via SWIFT network.',
    ),
    backward(
        2, 1, 0, PACS_002,
        description='HSBC Singapore acknowledges receipt',
        duration='~30 sec',
        template=f"""
<FIToFIPmtStsRpt>
  <GrpHdr>
    <MsgId>HSBC-STS-0001</MsgId>
    <CreDtTm>2026-02-18T09:15:30+08:00</CreDtTm>
  </GrpHdr>
  <TxInfAndSts>
    <OrgnlEndToEndId>E2E-SGD-GBP-001</OrgnlEndToEndId>
    <OrgnlUETR>{UETR}</OrgnlUETR>
    <TxSts>ACSP</TxSts>
    <StsRsnInf><Rsn><Cd>G000</Cd></Rsn></StsRsnInf>
  </TxInfAndSts>
</FIToFIPmtStsRpt>""",
        detail='HSBC Singapore sends ACSP (Accepted Settlement in Process) status back to DBS. '
               'The UETR links this confirmation to the original payment.',
    ),
    forward(
        3, 1, 2, PACS_008,
        description='HSBC SG forwards to HSBC London',
        duration='4-8 hrs', fee=25,
        fx_rate='0.5812', fx_from='SGD', fx_to='GBP',
        nostro_action='Debit: HSBC SG nostro (SGD) → Credit: HSBC London nostro (GBP)',
        template=f"""
<CdtTrfTxInf>
  <PmtId>
    <InstrId>HSBC-FWD-0001</InstrId>
    <EndToEndId>E2E-SGD-GBP-001</EndToEndId>
    <UETR>{UETR}</UETR>
  </PmtId>
  <IntrBkSttlmAmt Ccy="GBP">29025.13</IntrBkSttlmAmt>
  <InstdAmt Ccy="SGD">49965.00</InstdAmt>
  <XchgRate>0.5812</XchgRate>
  <ChrgsInf>
    <Amt Ccy="SGD">25.00</Amt>
    <Agt><FinInstnId><BICFI>HSBCSGSG</BICFI></FinInstnId></Agt>
  </ChrgsInf>
  <InstgAgt><FinInstnId><BICFI>HSBCSGSG</BICFI></FinInstnId></InstgAgt>
  <InstdAgt><FinInstnId><BICFI>HSBCGB2L</BICFI></FinInstnId></InstdAgt>
</CdtTrfTxInf>""",
        detail='HSBC Singapore converts SGD→GBP at 0.5812 (mid-market: 0.5832, spread: 0.35%). '
               'Deducts a S$25 correspondent fee. Forwards via intra-group HSBC network to London.',
    ),
    backward(
        4, 2, 1, CAMT_054,
        description='HSBC London confirms nostro credit',
        duration='~1 min',
        template=f"""
<BkToCstmrDbtCdtNtfctn>
  <Ntfctn>
    <Id>HSBC-NTF-0001</Id>
    <Acct><Id><IBAN>GB29HSBC40120712345678</IBAN></Id></Acct>
    <Ntry>
      <Amt Ccy="GBP">29025.13</Amt>
      <CdtDbtInd>CRDT</CdtDbtInd>
      <Sts><Cd>BOOK</Cd></Sts>
      <NtryDtls><TxDtls><Refs>
        <EndToEndId>E2E-SGD-GBP-001</EndToEndId>
        <UETR>{UETR}</UETR>
      </Refs></TxDtls></NtryDtls>
    </Ntry>
  </Ntfctn>
</BkToCstmrDbtCdtNtfctn>""",
        detail='HSBC London sends camt.054 credit notification confirming GBP funds have been booked '
               'to the nostro account. This enables HSBC SG to reconcile.',
    ),
    forward(
        5, 2, 3, PACS_008,
        description='HSBC London forwards to Barclays',
        duration='2-4 hrs', fee=15,
        nostro_action='Debit: HSBC London nostro → Credit: Barclays settlement via CHAPS',
        template=f"""
<CdtTrfTxInf>
  <PmtId>
    <InstrId>HSBC-LDN-0001</InstrId>
    <EndToEndId>E2E-SGD-GBP-001</EndToEndId>
    <UETR>{UETR}</UETR>
  </PmtId>
  <IntrBkSttlmAmt Ccy="GBP">29010.13</IntrBkSttlmAmt>
  <ChrgsInf>
    <Amt Ccy="GBP">15.00</Amt>
    <Agt><FinInstnId><BICFI>HSBCGB2L</BICFI></FinInstnId></Agt>
  </ChrgsInf>
  <InstgAgt><FinInstnId><BICFI>HSBCGB2L</BICFI></FinInstnId></InstgAgt>
  <InstdAgt><FinInstnId><BICFI>BARCGB22</BICFI></FinInstnId></InstdAgt>
  <RmtInf><Ustrd>Payment for services - INV-2026-0042</Ustrd></RmtInf>
</CdtTrfTxInf>""",
        detail='HSBC London deducts £15 intermediary fee, settles with Barclays via CHAPS (UK RTGS, '
               'immediate finality). Remittance info preserved end-to-end.',
    ),
    backward(
        6, 3, 2, PACS_002,
        description='Barclays confirms credit to beneficiary',
        duration='~1 min',
        template=f"""
<FIToFIPmtStsRpt>
  <TxInfAndSts>
    <OrgnlEndToEndId>E2E-SGD-GBP-001</OrgnlEndToEndId>
    <OrgnlUETR>{UETR}</OrgnlUETR>
    <TxSts>ACCC</TxSts>
    <AccptncDtTm>2026-02-18T17:42:00+00:00</AccptncDtTm>
  </TxInfAndSts>
</FIToFIPmtStsRpt>""",
        detail='Barclays sends ACCC (Accepted Credit Completed): beneficiary account credited. '
               'SWIFT gpi Tracker updated. Fees along the way: S$35 + S$25 + £15.',
    ),
    backward(
        7, 2, 0, PACS_002,
        message_name=END_TO_END_STATUS,
        description='Final confirmation relayed to DBS',
        duration='~2 min',
        template=f"""
<FIToFIPmtStsRpt>
  <TxInfAndSts>
    <OrgnlEndToEndId>E2E-SGD-GBP-001</OrgnlEndToEndId>
    <OrgnlUETR>{UETR}</OrgnlUETR>
    <TxSts>ACCC</TxSts>
    <ChrgsInf>
      <TtlChrgsAndTaxAmt Ccy="SGD">75.00</TtlChrgsAndTaxAmt>
    </ChrgsInf>
  </TxInfAndSts>
</FIToFIPmtStsRpt>""",
        detail='DBS receives final ACCC confirmation via gpi Tracker. Customer notified. '
               'Total journey: ~24 hrs.',
    ),
)


COVER_STEPS = (
    forward(
        1, 0, 3, PACS_008,
        description='DBS sends the payment instruction straight to Barclays',
        duration='~2 min',
        template=f"""
<FIToFICstmrCdtTrf>
  <GrpHdr>
    <MsgId>DBS-2026021800002</MsgId>
    <NbOfTxs>1</NbOfTxs>
    <SttlmInf>
      <SttlmMtd>COVE</SttlmMtd>
      <InstgRmbrsmntAgt><FinInstnId><BICFI>HSBCSGSG</BICFI></FinInstnId></InstgRmbrsmntAgt>
    </SttlmInf>
  </GrpHdr>
  <CdtTrfTxInf>
    <PmtId><EndToEndId>E2E-SGD-GBP-002</EndToEndId><UETR>{UETR}</UETR></PmtId>
    <IntrBkSttlmAmt Ccy="SGD">50000.00</IntrBkSttlmAmt>
    <ChrgBr>SHAR</ChrgBr>
    <InstgAgt><FinInstnId><BICFI>DBSSSGSG</BICFI></FinInstnId></InstgAgt>
    <InstdAgt><FinInstnId><BICFI>BARCGB22</BICFI></FinInstnId></InstdAgt>
  </CdtTrfTxInf>
</FIToFICstmrCdtTrf>""",
        detail='Cover method: DBS sends the customer credit transfer directly to Barclays so the '
               'beneficiary bank learns of the payment immediately. No money moves on this message; '
               'settlement follows separately through the correspondent chain.',
    ),
    forward(
        2, 0, 1, PACS_009,
        description='DBS funds the cover through HSBC Singapore',
        duration='~5 min', fee=35,
        nostro_action='Debit: DBS SGD vostro at HSBC Singapore',
        template=f"""
<FICdtTrf>
  <CdtTrfTxInf>
    <PmtId><EndToEndId>E2E-SGD-GBP-002</EndToEndId><UETR>{UETR}</UETR></PmtId>
    <IntrBkSttlmAmt Ccy="SGD">49965.00</IntrBkSttlmAmt>
    <Dbtr><FinInstnId><BICFI>DBSSSGSG</BICFI></FinInstnId></Dbtr>
    <Cdtr><FinInstnId><BICFI>BARCGB22</BICFI></FinInstnId></Cdtr>
    <UndrlygCstmrCdtTrf>
      <DbtrAgt><FinInstnId><BICFI>DBSSSGSG</BICFI></FinInstnId></DbtrAgt>
      <CdtrAgt><FinInstnId><BICFI>BARCGB22</BICFI></FinInstnId></CdtrAgt>
    </UndrlygCstmrCdtTrf>
  </CdtTrfTxInf>
</FICdtTrf>""",
        detail='pacs.009 COV carries the underlying customer details so every correspondent can '
               'screen the payment. DBS charges its S$35 originator fee.',
    ),
    backward(
        3, 1, 0, PACS_002,
        description='HSBC Singapore accepts the cover',
        duration='~30 sec',
        template=f"""
<FIToFIPmtStsRpt>
  <TxInfAndSts>
    <OrgnlEndToEndId>E2E-SGD-GBP-002</OrgnlEndToEndId>
    <OrgnlUETR>{UETR}</OrgnlUETR>
    <TxSts>ACSP</TxSts>
  </TxInfAndSts>
</FIToFIPmtStsRpt>""",
        detail='HSBC Singapore confirms the cover is accepted for settlement.',
    ),
    forward(
        4, 1, 2, PACS_009,
        description='HSBC SG converts and passes the cover to HSBC London',
        duration='4-8 hrs', fee=25,
        fx_rate='0.5812', fx_from='SGD', fx_to='GBP',
        nostro_action='Debit: HSBC SG nostro (SGD) → Credit: HSBC London nostro (GBP)',
        template=f"""
<FICdtTrf>
  <CdtTrfTxInf>
    <PmtId><EndToEndId>E2E-SGD-GBP-002</EndToEndId><UETR>{UETR}</UETR></PmtId>
    <IntrBkSttlmAmt Ccy="GBP">29025.13</IntrBkSttlmAmt>
    <XchgRate>0.5812</XchgRate>
    <InstgAgt><FinInstnId><BICFI>HSBCSGSG</BICFI></FinInstnId></InstgAgt>
    <InstdAgt><FinInstnId><BICFI>HSBCGB2L</BICFI></FinInstnId></InstdAgt>
  </CdtTrfTxInf>
</FICdtTrf>""",
        detail='The FX conversion happens on the settlement leg: SGD→GBP at 0.5812 after a S$25 '
               'correspondent fee.',
    ),
    backward(
        5, 2, 1, CAMT_054,
        description='HSBC London confirms GBP nostro credit',
        duration='~1 min',
        template=f"""
<BkToCstmrDbtCdtNtfctn>
  <Ntfctn>
    <Ntry>
      <Amt Ccy="GBP">29025.13</Amt>
      <CdtDbtInd>CRDT</CdtDbtInd>
      <Sts><Cd>BOOK</Cd></Sts>
      <NtryDtls><TxDtls><Refs><UETR>{UETR}</UETR></Refs></TxDtls></NtryDtls>
    </Ntry>
  </Ntfctn>
</BkToCstmrDbtCdtNtfctn>""",
        detail='HSBC London books the GBP funds and notifies HSBC Singapore.',
    ),
    forward(
        6, 2, 3, PACS_009,
        description='HSBC London settles the cover with Barclays over CHAPS',
        duration='2-4 hrs', fee=15,
        nostro_action='Debit: HSBC London nostro → Credit: Barclays settlement via CHAPS',
        template=f"""
<FICdtTrf>
  <CdtTrfTxInf>
    <PmtId><EndToEndId>E2E-SGD-GBP-002</EndToEndId><UETR>{UETR}</UETR></PmtId>
    <IntrBkSttlmAmt Ccy="GBP">29010.13</IntrBkSttlmAmt>
    <InstgAgt><FinInstnId><BICFI>HSBCGB2L</BICFI></FinInstnId></InstgAgt>
    <InstdAgt><FinInstnId><BICFI>BARCGB22</BICFI></FinInstnId></InstdAgt>
  </CdtTrfTxInf>
</FICdtTrf>""",
        detail='HSBC London takes a £15 fee and settles with Barclays via CHAPS.',
    ),
    backward(
        7, 3, 2, PACS_002,
        description='Barclays confirms cover received',
        duration='~1 min',
        template=f"""
<FIToFIPmtStsRpt>
  <TxInfAndSts>
    <OrgnlUETR>{UETR}</OrgnlUETR>
    <TxSts>ACSC</TxSts>
  </TxInfAndSts>
</FIToFIPmtStsRpt>""",
        detail='Barclays matches the cover funds against the pacs.008 it already holds and '
               'confirms settlement to HSBC London.',
    ),
    backward(
        8, 3, 0, PACS_002,
        message_name=END_TO_END_STATUS,
        description='Barclays confirms credit directly to DBS',
        duration='~2 min',
        template=f"""
<FIToFIPmtStsRpt>
  <TxInfAndSts>
    <OrgnlEndToEndId>E2E-SGD-GBP-002</OrgnlEndToEndId>
    <OrgnlUETR>{UETR}</OrgnlUETR>
    <TxSts>ACCC</TxSts>
  </TxInfAndSts>
</FIToFIPmtStsRpt>""",
        detail='Barclays credits the beneficiary and reports ACCC straight back to DBS along the '
               'direct instruction path.',
    ),
)


def create_sgd_gbp_corridor() -> Corridor:
    """Singapore → London: four banks, one SGD→GBP conversion."""
    return Corridor(
        id='sgd-gbp',
        name='Singapore → London',
        sender_country='Singapore',
        sender_flag='🇸🇬',
        receiver_country='United Kingdom',
        receiver_flag='🇬🇧',
        source_currency='SGD',
        target_currency='GBP',
        default_amount=50000,
        fx_rate='0.5812',
        fx_spread='0.35%',
        total_cost_pct='2.1%',
        settlement_time='24-48 hrs',
        banks=BANKS,
        serial_steps=SERIAL_STEPS,
        cover_steps=COVER_STEPS,
        uetr=UETR,
    )
