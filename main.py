# main.py

import datetime
import logging
import threading

from features.document_submitter import DocumentSubmitter
from features.documents import Description, Document, Product
from utils.config import load_settings
from utils.errors import SubmissionError
from utils.rate_limiter import AdmissionGate
from utils.transport import RequestsTransport

NUM_SUBMISSIONS = 20


def build_sample_document():
    sample_date = datetime.date(2020, 1, 23)
    product = Product(
        certificate_document='string',
        certificate_document_date=sample_date,
        certificate_document_number='string',
        owner_inn='string',
        producer_inn='string',
        production_date=sample_date,
        tnved_code='string',
        uit_code='string',
        uitu_code='string',
    )
    return Document(
        description=Description('string'),
        doc_id='string',
        doc_status='string',
        import_request=True,
        owner_inn='string',
        participant_inn='string',
        producer_inn='string',
        production_date=sample_date,
        production_type='string',
        products=[product],
        reg_date=sample_date,
        reg_number='string',
    )


def submit_once(submitter, document, signature, cancel_event):
    try:
        submitter.submit(document, signature, cancel_event=cancel_event)
    except SubmissionError as e:
        logging.error(f"Submission failed ({e.code}): {e.message}")


def main():
    settings = load_settings()

    # Configure logging
    logging.basicConfig(level=settings.log_level, format='%(asctime)s - %(levelname)s - %(message)s')

    gate = AdmissionGate(settings.time_unit, settings.request_limit)
    submitter = DocumentSubmitter(
        gate,
        transport=RequestsTransport(timeout=settings.request_timeout),
        url=settings.api_url,
    )
    logging.info(
        f"Submitting {NUM_SUBMISSIONS} documents, at most {settings.request_limit} "
        f"per {settings.time_unit.name.lower()} (one every {gate.sleep_quantum_ms} ms)."
    )

    document = build_sample_document()
    cancel_event = threading.Event()
    threads = [
        threading.Thread(target=submit_once, args=(submitter, document, settings.signature, cancel_event))
        for _ in range(NUM_SUBMISSIONS)
    ]
    for thread in threads:
        thread.start()

    try:
        for thread in threads:
            thread.join()
    except KeyboardInterrupt:
        logging.info("Shutting down, cancelling pending submissions...")
        gate.interrupt(cancel_event)
        for thread in threads:
            thread.join()
    finally:
        submitter.close()


if __name__ == "__main__":
    main()
