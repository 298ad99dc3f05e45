# features/document_submitter.py

import logging

from features.documents import serialize_document
from utils.config import REQUEST_URL
from utils.transport import RequestsTransport


class DocumentSubmitter:
    def __init__(self, gate, transport=None, url=REQUEST_URL):
        self.gate = gate
        self.transport = transport or RequestsTransport()
        self.url = url

    def submit(self, document, signature, cancel_event=None):
        """
        Send a document to the endpoint once the gate admits this caller.

        Raises CancelledWait, SerializationError or TransportError. The gate's
        timestamp only moves when the request was actually sent, whatever
        status code came back.
        """
        with self.gate.admission(cancel_event) as admitted_at:
            body = serialize_document(document)

            headers = {'Content-type': 'application/json'}
            self.attach_signature(headers, signature)

            result = self.transport.send(self.url, body, headers)
            self.gate.record_completion(admitted_at)

        if result.ok:
            logging.info(f"Document {document.doc_id} submitted (status {result.status_code}).")
        else:
            logging.warning(f"Document {document.doc_id} submitted but endpoint answered {result.status_code}.")
        return result

    # Same operation under the endpoint's name
    create_document = submit

    def attach_signature(self, headers, signature):
        headers['signature'] = signature

    def close(self):
        self.transport.close()
