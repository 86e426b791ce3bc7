# ============================================================
# publisher.py — Émission d'événements RabbitMQ
# ------------------------------------------------------------
# Le service Booking informe les autres services (notification)
# des changements de réservation : BookingCreated,
# BookingRoomChanged.
# ============================================================
import json
import logging

import pika
from pika.exceptions import AMQPError

from config import EVENTS_ENABLED, RABBITMQ_HOST

logger = logging.getLogger(__name__)


# Publie un message sur l'échange "events" en mode fanout :
#
#   - event_type : nom de l'événement
#   - payload    : contenu du message
#
# Tous les consommateurs liés à l'échange reçoivent le message.
# L'écriture en base est déjà validée : un broker indisponible
# est journalisé mais ne fait pas échouer la requête.

def publish_event(event_type: str, payload: dict):
    if not EVENTS_ENABLED:
        logger.debug(f"events disabled, dropping {event_type} {payload}")
        return

    conn = None
    try:
        conn = pika.BlockingConnection(pika.ConnectionParameters(host=RABBITMQ_HOST))
        ch = conn.channel()
        # durable=True pour survivre aux redémarrages RabbitMQ
        ch.exchange_declare(exchange="events", exchange_type="fanout", durable=True)
        message = {"type": event_type, "payload": payload}
        ch.basic_publish(exchange="events", routing_key="", body=json.dumps(message))
        logger.info(f"[event] {event_type} {payload}")
    except (AMQPError, OSError):
        logger.exception(f"[event] failed to publish {event_type} {payload}")
    finally:
        if conn is not None and conn.is_open:
            conn.close()
