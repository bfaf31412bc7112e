"""Pytest configuration: shared CAMT.053 samples and human-readable test names.

Test function docstrings are used as display names in pytest output,
making test reports more readable and understandable.
"""

import pytest

HEADER_ONLY_XML = """<?xml version="1.0" encoding="UTF-8"?>
<Document xmlns="urn:iso:std:iso:20022:tech:xsd:camt.053.001.08">
  <BkToCstmrStmt>
    <GrpHdr>
      <MsgId>BCS_1101537865_20250102_001_978</MsgId>
      <CreDtTm>2025-01-03T00:18:37.874</CreDtTm>
    </GrpHdr>
  </BkToCstmrStmt>
</Document>"""

STATEMENT_XML = """<?xml version="1.0" encoding="UTF-8"?>
<Document xmlns="urn:iso:std:iso:20022:tech:xsd:camt.053.001.08">
  <BkToCstmrStmt>
    <GrpHdr>
      <MsgId>BCS_1101537865_20250102_001_978</MsgId>
      <CreDtTm>2025-01-03T00:18:37.874</CreDtTm>
    </GrpHdr>
    <Stmt>
      <Id>BCS_1101537865_20250102_001_978</Id>
      <LglSeqNb>1</LglSeqNb>
      <CreDtTm>2025-01-03T00:18:37.874</CreDtTm>
      <FrToDt>
        <FrDtTm>2025-01-02T00:00:00.000</FrDtTm>
        <ToDtTm>2025-01-02T23:59:59.999</ToDtTm>
      </FrToDt>
      <RptgSrc>
        <Prtry>HAABHR22XXX14036333877</Prtry>
      </RptgSrc>
      <Acct>
        <Id>
          <IBAN>HR1725000091101537865</IBAN>
        </Id>
        <Ccy>EUR</Ccy>
        <Nm>Transakcijski račun poslovnog subjekta</Nm>
        <Ownr>
          <Nm>EBIZ D.O.O.</Nm>
          <PstlAdr>
            <AdrLine>PRISAVLJE 10</AdrLine>
            <AdrLine>ZAGREB</AdrLine>
          </PstlAdr>
          <Id>
            <OrgId>
              <Othr>
                <Id>23732108701</Id>
              </Othr>
            </OrgId>
          </Id>
        </Ownr>
      </Acct>
      <Bal>
        <Tp>
          <CdOrPrtry>
            <Cd>OPBD</Cd>
          </CdOrPrtry>
        </Tp>
        <Amt Ccy="EUR">1191.59</Amt>
        <CdtDbtInd>CRDT</CdtDbtInd>
        <Dt>
          <Dt>2025-01-02</Dt>
        </Dt>
      </Bal>
      <Bal>
        <Tp>
          <CdOrPrtry>
            <Cd>CLBD</Cd>
          </CdOrPrtry>
        </Tp>
        <Amt Ccy="EUR">533.21</Amt>
        <CdtDbtInd>CRDT</CdtDbtInd>
        <Dt>
          <Dt>2025-01-02</Dt>
        </Dt>
      </Bal>
      <TxsSummry>
        <TtlCdtNtries>
          <NbOfNtries>1</NbOfNtries>
          <Sum>500.00</Sum>
        </TtlCdtNtries>
        <TtlDbtNtries>
          <NbOfNtries>1</NbOfNtries>
          <Sum>1158.38</Sum>
        </TtlDbtNtries>
      </TxsSummry>
      <Ntry>
        <NtryRef>7019236935</NtryRef>
        <Amt Ccy="EUR">1158.38</Amt>
        <CdtDbtInd>DBIT</CdtDbtInd>
        <RvslInd>false</RvslInd>
        <Sts>
          <Cd>BOOK</Cd>
        </Sts>
        <BookgDt>
          <Dt>2025-01-02</Dt>
        </BookgDt>
        <ValDt>
          <Dt>2025-01-02</Dt>
        </ValDt>
        <AcctSvcrRef>9012530459730985</AcctSvcrRef>
        <BkTxCd>
          <Prtry>
            <Cd>NOTPROVIDED</Cd>
          </Prtry>
        </BkTxCd>
        <NtryDtls>
          <TxDtls>
            <Refs>
              <AcctSvcrRef>9012530459730985</AcctSvcrRef>
              <EndToEndId>HR99</EndToEndId>
            </Refs>
            <AmtDtls>
              <TxAmt>
                <Amt Ccy="EUR">1158.38</Amt>
              </TxAmt>
            </AmtDtls>
            <RltdPties>
              <Cdtr>
                <Pty>
                  <Nm>HRVATSKI TELEKOM D.D.</Nm>
                  <PstlAdr>
                    <Ctry>HR</Ctry>
                    <AdrLine>RADNIČKA CESTA 21</AdrLine>
                  </PstlAdr>
                </Pty>
              </Cdtr>
              <CdtrAcct>
                <Id>
                  <IBAN>HR6423600001101224677</IBAN>
                </Id>
              </CdtrAcct>
            </RltdPties>
            <RmtInf>
              <Strd>
                <CdtrRefInf>
                  <Tp>
                    <CdOrPrtry>
                      <Cd>SCOR</Cd>
                    </CdOrPrtry>
                  </Tp>
                  <Ref>HR0112345-6789</Ref>
                </CdtrRefInf>
                <AddtlRmtInf>RACUN 12/2024</AddtlRmtInf>
              </Strd>
            </RmtInf>
          </TxDtls>
        </NtryDtls>
      </Ntry>
      <Ntry>
        <Amt Ccy="EUR">500.00</Amt>
        <CdtDbtInd>CRDT</CdtDbtInd>
        <RvslInd>true</RvslInd>
        <Sts>
          <Cd>BOOK</Cd>
        </Sts>
        <BookgDt>
          <DtTm>2025-01-02T10:15:00</DtTm>
        </BookgDt>
        <ValDt>
          <Dt>2025-01-02</Dt>
        </ValDt>
        <AcctSvcrRef>9012530459730986</AcctSvcrRef>
      </Ntry>
    </Stmt>
  </BkToCstmrStmt>
</Document>"""


@pytest.fixture
def header_only_xml() -> str:
    return HEADER_ONLY_XML


@pytest.fixture
def statement_xml() -> str:
    return STATEMENT_XML


@pytest.fixture
def statement_file(tmp_path, statement_xml):
    """CAMT.053 statement written to a temporary file."""
    path = tmp_path / "statement.xml"
    path.write_text(statement_xml, encoding="utf-8")
    return path


def pytest_collection_modifyitems(items):
    """
    Modify test items to use docstrings as human-readable names.

    For each test function, if it has a docstring, the first non-empty line
    of the docstring becomes the test name in reports. For parameterized tests,
    the parameter ID is preserved.
    """
    for item in items:
        doc = item.function.__doc__
        if doc:
            summary = next(
                (line.strip() for line in doc.strip().splitlines() if line.strip()),
                None
            )
            if summary:
                if hasattr(item, "callspec"):
                    start = item.nodeid.find('[')
                    param_part = item.nodeid[start:] if start != -1 else ''
                    item._nodeid = summary + param_part
                else:
                    item._nodeid = summary
