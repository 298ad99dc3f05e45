# features/documents.py

import json
import logging
import datetime

from utils.errors import SerializationError

DOC_TYPE = 'LP_INTRODUCE_GOODS'


def _format_date(field_name, value):
    if value is None:
        return None
    if isinstance(value, datetime.datetime):
        value = value.date()
    if not isinstance(value, datetime.date):
        raise SerializationError(f"Field '{field_name}' must be a date, got {type(value).__name__}")
    return value.strftime('%Y-%m-%d')


class Description:
    def __init__(self, participant_inn):
        self.participant_inn = participant_inn

    def to_dict(self):
        return {'participantInn': self.participant_inn}


class Product:
    def __init__(self, certificate_document, certificate_document_date, certificate_document_number,
                 owner_inn, producer_inn, production_date, tnved_code, uit_code, uitu_code):
        self.certificate_document = certificate_document
        self.certificate_document_date = certificate_document_date
        self.certificate_document_number = certificate_document_number
        self.owner_inn = owner_inn
        self.producer_inn = producer_inn
        self.production_date = production_date
        self.tnved_code = tnved_code
        self.uit_code = uit_code
        self.uitu_code = uitu_code

    def to_dict(self):
        return {
            'certificate_document': self.certificate_document,
            'certificate_document_date': _format_date('certificate_document_date', self.certificate_document_date),
            'certificate_document_number': self.certificate_document_number,
            'owner_inn': self.owner_inn,
            'producer_inn': self.producer_inn,
            'production_date': _format_date('production_date', self.production_date),
            'tnved_code': self.tnved_code,
            'uit_code': self.uit_code,
            'uitu_code': self.uitu_code,
        }


class Document:
    # doc_type is fixed for this endpoint
    doc_type = DOC_TYPE

    def __init__(self, description, doc_id, doc_status, import_request, owner_inn, participant_inn,
                 producer_inn, production_date, production_type, products, reg_date, reg_number):
        self.description = description
        self.doc_id = doc_id
        self.doc_status = doc_status
        self.import_request = import_request
        self.owner_inn = owner_inn
        self.participant_inn = participant_inn
        self.producer_inn = producer_inn
        self.production_date = production_date
        self.production_type = production_type
        self.products = list(products or [])
        self.reg_date = reg_date
        self.reg_number = reg_number

    def to_dict(self):
        return {
            'description': self.description.to_dict() if self.description is not None else None,
            'doc_id': self.doc_id,
            'doc_status': self.doc_status,
            'doc_type': self.doc_type,
            'importRequest': self.import_request,
            'owner_inn': self.owner_inn,
            'participant_inn': self.participant_inn,
            'producer_inn': self.producer_inn,
            'production_date': _format_date('production_date', self.production_date),
            'production_type': self.production_type,
            'products': [product.to_dict() for product in self.products],
            'reg_date': _format_date('reg_date', self.reg_date),
            'reg_number': self.reg_number,
        }


def serialize_document(document):
    try:
        return json.dumps(document.to_dict(), ensure_ascii=False).encode('utf-8')
    except SerializationError as e:
        logging.error(f"Error serializing document: {e}")
        raise
    except (TypeError, ValueError, AttributeError) as e:
        logging.error(f"Error serializing document: {e}")
        raise SerializationError(f"Document could not be serialized: {e}", cause=e) from e
