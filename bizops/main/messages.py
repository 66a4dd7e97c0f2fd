# bizops/main/messages.py
from flask import jsonify

from ..main import json_body, main
from ..services.messages import list_messages, send_message


@main.route("/api/messages", methods=["GET"], endpoint="messages_list")
def messages_list():
    return jsonify([m.to_dict() for m in list_messages()])


@main.route("/api/messages", methods=["POST"], endpoint="messages_send")
def messages_send():
    payload = json_body()
    msg = send_message(payload.get("text"), payload.get("sender"))
    return jsonify({
        "id": msg.id,
        "message": "Message sent successfully",
        "messageData": msg.to_dict(),
    })
