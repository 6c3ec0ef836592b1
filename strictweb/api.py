from flask import Flask, jsonify, request
from strictpass.errors import InvalidOption, ValidationError
from strictpass.generator import PasswordGenerator
from strictpass.options import Options

app = Flask(__name__)

@app.errorhandler(ValidationError)
def validation_error(e):
    return jsonify(e.to_dict()), 400

def _options_body():
    data = request.get_json(silent=True) or {}
    if not isinstance(data, dict):
        raise InvalidOption("request body must be a JSON object")
    return dict(data)

@app.route('/')
def home():
    return jsonify({
        "message": "StrictPass API is running"
    })

@app.route('/generate', methods=['POST'])
def generate_route():
    options = Options.from_dict(_options_body())
    password = PasswordGenerator().generate(options)
    return jsonify({'password': password})

@app.route('/generate-multiple', methods=['POST'])
def generate_multiple_route():
    data = _options_body()
    amount = data.pop('amount', 1)
    options = Options.from_dict(data)
    passwords = PasswordGenerator().generate_multiple(amount, options)
    return jsonify({'passwords': passwords})

if __name__ == "__main__":
    app.run(debug=True)
